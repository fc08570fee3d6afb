"""
Single-table entity store on top of one MongoDB collection.

Every entity type shares the same collection. Items are addressed by a
composite primary key (pk, sk) built from the entity's identity attributes
and prefixed with the service and entity names, e.g.

    pk     = "$ton-service#userid_5f0c..."
    sk     = "$user_1"
    gsi1pk = "$ton-service#email_jane@example.com"   (secondary index, optional)
    gsi1sk = "$user_1"

so that different entity types never collide and the same access patterns
(by id, by secondary key, full scan) map onto two indexes.
"""

# Standard library imports
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, IndexModel, ReturnDocument

# Local application imports
from ...domain.constants import TableFields
from ...domain.exceptions import ValidationError
from .cursor import decode_cursor, encode_cursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySchema:
    """Describes how one entity type is laid out in the table"""
    entity: str
    service: str
    identity: str
    attributes: Tuple[str, ...]
    pk_composite: Tuple[str, ...]
    sk_composite: Tuple[str, ...] = ()
    gsi1_pk_composite: Tuple[str, ...] = ()
    gsi1_sk_composite: Tuple[str, ...] = ()
    nullable: Tuple[str, ...] = ()
    version: str = "1"

    @property
    def has_secondary_index(self) -> bool:
        return bool(self.gsi1_pk_composite)

    @property
    def key_attributes(self) -> Tuple[str, ...]:
        """Attributes that take part in any key; they can never be updated"""
        composites = (
            self.pk_composite
            + self.sk_composite
            + self.gsi1_pk_composite
            + self.gsi1_sk_composite
        )
        return tuple(dict.fromkeys((self.identity,) + composites))

    @property
    def pk_prefix(self) -> str:
        return f"${self.service}"

    @property
    def sk_prefix(self) -> str:
        return f"${self.entity}_{self.version}"


def _compose(prefix: str, composite: Tuple[str, ...], values: Mapping[str, Any]) -> str:
    parts = [prefix]
    for attribute in composite:
        if attribute not in values or values[attribute] is None:
            raise ValidationError(f"Missing key attribute: {attribute}")
        parts.append(f"{attribute.replace('_', '').lower()}_{values[attribute]}")
    return "#".join(parts)


async def ensure_table_indexes(collection: AsyncIOMotorCollection) -> None:
    """
    Create the primary and secondary indexes of the table (idempotent).

    The secondary index is not unique: email uniqueness is checked by the
    application before writing, not by the store.
    """
    await collection.create_indexes([
        IndexModel(
            [(TableFields.PK, ASCENDING), (TableFields.SK, ASCENDING)],
            name=TableFields.PRIMARY_INDEX,
            unique=True,
        ),
        IndexModel(
            [(TableFields.GSI1_PK, ASCENDING), (TableFields.GSI1_SK, ASCENDING)],
            name=TableFields.GSI1_INDEX,
            sparse=True,
        ),
    ])
    logger.info(f"Ensured single-table indexes on collection '{collection.name}'")


class SingleTableStore:
    """
    Generic key-value mapping of one entity type onto the shared table.

    Works on plain attribute dictionaries; turning them into domain models
    is the repository's job.
    """

    def __init__(self, collection: AsyncIOMotorCollection, schema: EntitySchema) -> None:
        self.collection = collection
        self.schema = schema

    def primary_key(self, values: Mapping[str, Any]) -> Dict[str, str]:
        return {
            TableFields.PK: _compose(self.schema.pk_prefix, self.schema.pk_composite, values),
            TableFields.SK: _compose(self.schema.sk_prefix, self.schema.sk_composite, values),
        }

    def secondary_key(self, values: Mapping[str, Any]) -> Dict[str, str]:
        return {
            TableFields.GSI1_PK: _compose(self.schema.pk_prefix, self.schema.gsi1_pk_composite, values),
            TableFields.GSI1_SK: _compose(self.schema.sk_prefix, self.schema.gsi1_sk_composite, values),
        }

    def _build_item(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        item: Dict[str, Any] = {
            name: attributes[name]
            for name in self.schema.attributes
            if attributes.get(name) is not None
        }
        item.update(self.primary_key(attributes))
        if self.schema.has_secondary_index:
            item.update(self.secondary_key(attributes))
        item[TableFields.ENTITY] = self.schema.entity
        item[TableFields.VERSION] = self.schema.version
        return item

    def _to_attributes(self, document: Mapping[str, Any]) -> Dict[str, Any]:
        return {name: document.get(name) for name in self.schema.attributes}

    def _check_changes(self, changes: Mapping[str, Any]) -> None:
        for name, value in changes.items():
            if name not in self.schema.attributes:
                raise ValidationError(f"Unknown attribute for {self.schema.entity}: {name}")
            if name in self.schema.key_attributes:
                raise ValidationError(f"Attribute '{name}' of {self.schema.entity} cannot be updated")
            if value is None and name not in self.schema.nullable:
                raise ValidationError(f"Attribute '{name}' of {self.schema.entity} cannot be null")

    async def get(self, key_values: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Get one item by primary key

        Args:
            key_values: Attributes making up the primary key composites

        Returns:
            Attribute dictionary if found, None otherwise
        """
        document = await self.collection.find_one(self.primary_key(key_values))
        if document is None:
            return None
        return self._to_attributes(document)

    async def put(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert a new item

        Args:
            attributes: Full attribute set of the entity

        Returns:
            Attribute dictionary as stored
        """
        item = self._build_item(attributes)
        # insert_one adds _id to the document it is given
        await self.collection.insert_one(dict(item))
        return self._to_attributes(item)

    async def update(
        self,
        key_values: Mapping[str, Any],
        changes: Mapping[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update

        Present values are set, explicit None values remove nullable
        attributes, absent attributes are left untouched.

        Args:
            key_values: Attributes making up the primary key composites
            changes: Attributes to change

        Returns:
            Updated attribute dictionary, None if the item does not exist
        """
        self._check_changes(changes)
        if not changes:
            return await self.get(key_values)

        to_set = {name: value for name, value in changes.items() if value is not None}
        to_unset = {name: "" for name, value in changes.items() if value is None}
        operations: Dict[str, Any] = {}
        if to_set:
            operations["$set"] = to_set
        if to_unset:
            operations["$unset"] = to_unset

        document = await self.collection.find_one_and_update(
            self.primary_key(key_values),
            operations,
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None
        return self._to_attributes(document)

    async def delete(self, key_values: Mapping[str, Any]) -> bool:
        """
        Delete one item by primary key

        Returns:
            True if an item was removed, False if there was nothing to remove
        """
        result = await self.collection.delete_one(self.primary_key(key_values))
        return result.deleted_count > 0

    async def scan(
        self,
        limit: int,
        cursor: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[str]]:
        """
        Scan all items of this entity type, one page at a time

        Items come back in primary key order. That order is stable for
        single-writer, low-churn workloads; items written or removed while
        a scan is in progress may or may not be seen.

        Args:
            limit: Maximum number of items in the page (>= 1)
            cursor: Cursor returned by the previous page, or None to start

        Returns:
            Tuple of (items, next_cursor); next_cursor is None on the last page

        Raises:
            ValidationError: If limit < 1 or the cursor is not one of ours
        """
        if limit < 1:
            raise ValidationError("Page limit must be at least 1")

        query: Dict[str, Any] = {TableFields.ENTITY: self.schema.entity}
        if cursor is not None:
            last_key = decode_cursor(cursor)
            if not (
                last_key[TableFields.PK].startswith(self.schema.pk_prefix + "#")
                and last_key[TableFields.SK].startswith(self.schema.sk_prefix)
            ):
                raise ValidationError("Invalid pagination cursor")
            query["$or"] = [
                {TableFields.PK: {"$gt": last_key[TableFields.PK]}},
                {
                    TableFields.PK: last_key[TableFields.PK],
                    TableFields.SK: {"$gt": last_key[TableFields.SK]},
                },
            ]

        # One extra item tells whether another page exists
        documents = await (
            self.collection.find(query)
            .sort([(TableFields.PK, ASCENDING), (TableFields.SK, ASCENDING)])
            .limit(limit + 1)
            .to_list(length=limit + 1)
        )

        page = documents[:limit]
        next_cursor = None
        if len(documents) > limit:
            last = page[-1]
            next_cursor = encode_cursor({
                TableFields.PK: last[TableFields.PK],
                TableFields.SK: last[TableFields.SK],
            })
        return [self._to_attributes(document) for document in page], next_cursor

    async def query_index(
        self,
        index_values: Mapping[str, Any],
        limit: int = 1,
    ) -> List[Dict[str, Any]]:
        """
        Point lookup through the secondary index

        Args:
            index_values: Attributes making up the secondary key composites
            limit: Maximum number of items to return

        Returns:
            Matching attribute dictionaries (possibly empty)
        """
        if not self.schema.has_secondary_index:
            raise ValueError(f"Entity {self.schema.entity} has no secondary index")

        documents = await (
            self.collection.find(self.secondary_key(index_values))
            .limit(limit)
            .to_list(length=limit)
        )
        return [self._to_attributes(document) for document in documents]
