# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.error_dto import ErrorResponse
from ...application.dto.product_dto import (
    ProductCreateRequest,
    ProductPageResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from ...application.use_cases.product import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from ...application.use_cases.product.list_products import DEFAULT_PAGE_SIZE
from ...di.container import get_container
from .dependencies import get_token_claims

MAX_PAGE_SIZE = 100

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Product not found"}}


router = APIRouter(
    tags=["products"],
    dependencies=[Depends(get_token_claims)],
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Missing or invalid token"}},
)


@router.get("", response_model=ProductPageResponse)
async def list_products(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Number of products per page"),
    next_key: Optional[str] = Query(None, alias="nextKey", description="Pagination cursor for next page"),
) -> ProductPageResponse:
    """
    Get all products with pagination

    Args:
        limit: Page size
        next_key: Opaque cursor returned with the previous page

    Returns:
        ProductPageResponse with the products and the next cursor
    """
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)
    return await list_products_use_case.execute(limit=limit, next_key=next_key)


@router.get("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSE)
async def get_product(product_id: str) -> ProductResponse:
    """Get product by ID"""
    container = get_container()
    get_product_use_case = container.get(GetProductUseCase)
    return await get_product_use_case.execute(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(request: ProductCreateRequest) -> ProductResponse:
    """Create a new product"""
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)
    return await create_product_use_case.execute(request)


@router.put("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSE)
async def update_product(product_id: str, request: ProductUpdateRequest) -> ProductResponse:
    """Update the provided fields of a product"""
    container = get_container()
    update_product_use_case = container.get(UpdateProductUseCase)
    return await update_product_use_case.execute(product_id, request)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str) -> None:
    """Delete product by ID (no-op if it does not exist)"""
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)
    await delete_product_use_case.execute(product_id)
