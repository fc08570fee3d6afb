"""
Version 1 HTTP endpoints: authentication and products.
"""
from .auth_controller import router as auth_router
from .product_controller import router as product_router
from .error_handlers import setup_exception_handlers


__all__ = ["auth_router", "product_router", "setup_exception_handlers"]
