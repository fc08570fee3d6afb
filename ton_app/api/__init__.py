"""
API layer for the TON backend.

Exposes the auth endpoints under /auth and the product endpoints under
/products.
"""
