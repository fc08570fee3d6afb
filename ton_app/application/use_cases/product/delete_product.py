# Local application imports
from ....domain.repositories.product_repository import ProductRepository


class DeleteProductUseCase:
    """Use case for deleting a product (deleting an absent product is a no-op)"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, product_id: str) -> None:
        await self.product_repository.delete(product_id)
