# Standard library imports
from typing import Any, Dict, Mapping

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from .mongo_entity_repository import MongoEntityRepository
from .single_table import EntitySchema, SingleTableStore


def product_schema(service: str) -> EntitySchema:
    """Single-table layout of the Product entity (primary key only)"""
    return EntitySchema(
        entity=ProductFields.ENTITY,
        service=service,
        identity=ProductFields.PRODUCT_ID,
        attributes=(
            ProductFields.PRODUCT_ID,
            ProductFields.TITLE,
            ProductFields.DESCRIPTION,
            ProductFields.PRICE,
            ProductFields.PUBLISH_DATE,
            ProductFields.PHOTO_LINK,
        ),
        pk_composite=(ProductFields.PRODUCT_ID,),
    )


class MongoProductRepository(MongoEntityRepository[Product], ProductRepository):
    """MongoDB single-table implementation of ProductRepository"""

    def __init__(self, table_collection: AsyncIOMotorCollection, service: str = "ton-service") -> None:
        super().__init__(SingleTableStore(table_collection, product_schema(service)))

    def _to_entity(self, attributes: Mapping[str, Any]) -> Product:
        return Product(
            product_id=attributes.get(ProductFields.PRODUCT_ID) or "",
            title=attributes.get(ProductFields.TITLE) or "",
            description=attributes.get(ProductFields.DESCRIPTION) or "",
            price=attributes.get(ProductFields.PRICE),
            publish_date=attributes.get(ProductFields.PUBLISH_DATE) or "",
            photo_link=attributes.get(ProductFields.PHOTO_LINK) or "",
        )

    def _to_attributes(self, product: Product) -> Dict[str, Any]:
        return {
            ProductFields.PRODUCT_ID: product.product_id,
            ProductFields.TITLE: product.title,
            ProductFields.DESCRIPTION: product.description,
            ProductFields.PRICE: product.price,
            ProductFields.PUBLISH_DATE: product.publish_date,
            ProductFields.PHOTO_LINK: product.photo_link,
        }
