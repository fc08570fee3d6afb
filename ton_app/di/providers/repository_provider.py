from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register all repository implementations.
        Both entity types share the single table collection.
        """
        table_collection = container.get("table_collection")

        container.register_singleton(
            UserRepository,
            MongoUserRepository(table_collection=table_collection, service=settings.service_name)
        )

        container.register_singleton(
            ProductRepository,
            MongoProductRepository(table_collection=table_collection, service=settings.service_name)
        )
