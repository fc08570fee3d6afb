from .base import CamelModel
from ...domain.models.user import AuthenticatedPrincipal


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    user_id: str
    name: str
    email: str

    @classmethod
    def from_principal(cls, principal: AuthenticatedPrincipal) -> "UserResponse":
        return cls(user_id=principal.user_id, name=principal.name, email=principal.email)
