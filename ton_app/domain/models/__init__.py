from .user import User, AuthenticatedPrincipal
from .product import Product
from .page import Page
from .token import TokenClaims

__all__ = ["User", "AuthenticatedPrincipal", "Product", "Page", "TokenClaims"]
