from typing import TYPE_CHECKING
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.product import (
    CreateProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider - registers all product-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all product use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            CreateProductUseCase,
            GetProductUseCase,
            ListProductsUseCase,
            UpdateProductUseCase,
            DeleteProductUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    product_repository=container.get(ProductRepository)
                )
            )
