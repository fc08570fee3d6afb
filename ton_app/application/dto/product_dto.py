# Standard library imports
from typing import List, Optional

# External package imports
from pydantic import Field, field_validator

# Local application imports
from .base import CamelModel
from ...domain.models.product import Product


class ProductCreateRequest(CamelModel):
    """DTO for product creation request"""
    title: str = Field(min_length=1)
    description: str
    price: float = Field(ge=0)
    publish_date: str = Field(min_length=1)
    photo_link: str = Field(min_length=1)


class ProductUpdateRequest(CamelModel):
    """
    DTO for partial product update.

    Only fields sent by the client are applied (see model_dump with
    exclude_unset). Products have no nullable fields, so an explicit null
    is rejected.
    """
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    publish_date: Optional[str] = Field(default=None, min_length=1)
    photo_link: Optional[str] = Field(default=None, min_length=1)

    @field_validator("*")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    def changes(self) -> dict:
        """Fields the client actually provided"""
        return self.model_dump(exclude_unset=True)


class ProductResponse(CamelModel):
    """DTO for product response"""
    product_id: str
    title: str
    description: str
    price: float
    publish_date: str
    photo_link: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            product_id=product.product_id,
            title=product.title,
            description=product.description,
            price=product.price,
            publish_date=product.publish_date,
            photo_link=product.photo_link,
        )


class ProductPageResponse(CamelModel):
    """DTO for one page of products"""
    products: List[ProductResponse]
    next_key: Optional[str] = None
