from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_database, get_table_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the store handle"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and the single table collection.
        Repositories receive the collection from here, never from a global.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("table_collection", get_table_collection())
