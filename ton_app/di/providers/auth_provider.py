from typing import TYPE_CHECKING
from ...core.security import PasswordHasher, TokenIssuer
from ...domain.repositories.user_repository import UserRepository
from ...application.services.credential_service import CredentialService
from ...application.use_cases.auth.get_current_user import AuthenticateTokenUseCase, GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the credential service and auth use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register authentication services and use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CredentialService,
            lambda: CredentialService(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
                token_issuer=container.get(TokenIssuer),
            )
        )

        container.register_factory(
            AuthenticateTokenUseCase,
            lambda: AuthenticateTokenUseCase(
                token_issuer=container.get(TokenIssuer)
            )
        )

        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
