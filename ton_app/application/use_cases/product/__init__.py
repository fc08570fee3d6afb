from .create_product import CreateProductUseCase
from .get_product import GetProductUseCase
from .list_products import ListProductsUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase

__all__ = [
    "CreateProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
