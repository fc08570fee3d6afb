from .mongo_connection import get_database, get_table_collection, close_database
from .single_table import EntitySchema, SingleTableStore, ensure_table_indexes
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository

__all__ = [
    "get_database",
    "get_table_collection",
    "close_database",
    "EntitySchema",
    "SingleTableStore",
    "ensure_table_indexes",
    "MongoUserRepository",
    "MongoProductRepository",
]
