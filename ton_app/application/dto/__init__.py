from .auth_dto import SignupRequest, LoginRequest, SignupResponse, LoginResponse
from .user_dto import UserResponse
from .product_dto import (
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductResponse,
    ProductPageResponse,
)
from .error_dto import ErrorResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "SignupResponse",
    "LoginResponse",
    "UserResponse",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductResponse",
    "ProductPageResponse",
    "ErrorResponse",
]
