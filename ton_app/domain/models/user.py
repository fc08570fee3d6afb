from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    user_id: str
    name: str
    email: str
    password_hash: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.name or len(self.name.strip()) < 2:
            raise ValueError("Name must be at least 2 characters")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")

    def to_principal(self) -> "AuthenticatedPrincipal":
        """Public projection of the user, without the password hash"""
        return AuthenticatedPrincipal(
            user_id=self.user_id,
            email=self.email,
            name=self.name,
        )


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """A user that passed credential verification (never persisted)"""
    user_id: str
    email: str
    name: str
