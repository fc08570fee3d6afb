# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by a verified access token"""
    subject: str
    email: str
    issued_at: int
    expires_at: int
