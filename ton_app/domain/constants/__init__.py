"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields
from .table_fields import TableFields

__all__ = [
    "UserFields",
    "ProductFields",
    "TableFields",
]
