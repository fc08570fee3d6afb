"""Constants for single-table key attributes shared by every entity type"""


class TableFields:
    """Attribute names of the single-table layout"""
    PK = "pk"
    SK = "sk"
    GSI1_PK = "gsi1pk"
    GSI1_SK = "gsi1sk"
    ENTITY = "__edb_e__"
    VERSION = "__edb_v__"

    PRIMARY_INDEX = "pk-sk-index"
    GSI1_INDEX = "gsi1pk-gsi1sk-index"
