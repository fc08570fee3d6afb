# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductCreateRequest, ProductResponse


class CreateProductUseCase:
    """Use case for creating a new product"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, request: ProductCreateRequest) -> ProductResponse:
        """
        Create a new product; its ID is generated by the repository

        Args:
            request: Product creation request

        Returns:
            ProductResponse with created product information
        """
        product = await self.product_repository.create(request.model_dump())
        return ProductResponse.from_product(product)
