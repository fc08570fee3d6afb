from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, TokenIssuer

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher and the token issuer built from settings"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.bcrypt_rounds)
        )

        container.register_singleton(
            TokenIssuer,
            TokenIssuer(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            )
        )
