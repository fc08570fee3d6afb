# Standard library imports
from dataclasses import dataclass


@dataclass
class Product:
    """
    Pure domain model for Product entity - no external dependencies.

    Products are independent of users; the only constraint beyond identity
    is a non-negative price.
    """
    product_id: str
    title: str
    description: str
    price: float
    publish_date: str
    photo_link: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.product_id:
            raise ValueError("Product ID is required")
        if self.price is None or self.price < 0:
            raise ValueError("Price must be a non-negative number")
