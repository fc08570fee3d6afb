from ..models.product import Product
from .entity_repository import EntityRepository


class ProductRepository(EntityRepository[Product]):
    """Repository interface - defines contract for product data access"""
