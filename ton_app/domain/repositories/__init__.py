from .entity_repository import EntityRepository
from .user_repository import UserRepository
from .product_repository import ProductRepository

__all__ = ["EntityRepository", "UserRepository", "ProductRepository"]
