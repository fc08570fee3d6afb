from .auth import (
    AuthenticateTokenUseCase,
    GetCurrentUserUseCase,
)
from .product import (
    CreateProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

__all__ = [
    "AuthenticateTokenUseCase",
    "GetCurrentUserUseCase",
    "CreateProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
