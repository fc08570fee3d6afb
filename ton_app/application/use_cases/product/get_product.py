from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductResponse


class GetProductUseCase:
    """Use case for getting a product by ID"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, product_id: str) -> ProductResponse:
        """Raises NotFoundError if the product does not exist"""
        product = await self.product_repository.get_by_id(product_id)
        return ProductResponse.from_product(product)
