# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductPageResponse, ProductResponse

DEFAULT_PAGE_SIZE = 10


class ListProductsUseCase:
    """Use case for listing products one page at a time"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(
        self,
        limit: int = DEFAULT_PAGE_SIZE,
        next_key: Optional[str] = None,
    ) -> ProductPageResponse:
        """
        List products

        Args:
            limit: Maximum number of products in the page
            next_key: Opaque cursor returned with the previous page (empty or None starts from the first page)

        Returns:
            ProductPageResponse with the products and the next cursor (None on the last page)
        """
        page = await self.product_repository.scan(limit, next_key or None)
        return ProductPageResponse(
            products=[ProductResponse.from_product(product) for product in page.items],
            next_key=page.next_cursor,
        )
