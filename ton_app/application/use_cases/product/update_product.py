# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductResponse, ProductUpdateRequest


class UpdateProductUseCase:
    """Use case for partially updating a product"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, product_id: str, request: ProductUpdateRequest) -> ProductResponse:
        """
        Apply the fields present in the request

        Raises:
            NotFoundError: If the product does not exist
        """
        product = await self.product_repository.update(product_id, request.changes())
        return ProductResponse.from_product(product)
