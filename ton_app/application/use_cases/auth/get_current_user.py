# Local application imports
from ....core.security import TokenIssuer
from ....domain.exceptions import InvalidTokenError, NotFoundError
from ....domain.models.token import TokenClaims
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class AuthenticateTokenUseCase:
    """Use case for turning a bearer token into its verified claims"""

    def __init__(self, token_issuer: TokenIssuer) -> None:
        self.token_issuer = token_issuer

    def execute(self, token: str) -> TokenClaims:
        """
        Verify a bearer token without touching the store

        Raises:
            InvalidTokenError: If the token is empty, malformed or badly signed
            TokenExpiredError: If the token has expired
        """
        if not token:
            raise InvalidTokenError("Missing bearer token")
        return self.token_issuer.verify(token)


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT claims"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, claims: TokenClaims) -> UserResponse:
        """
        Get current user from verified token claims

        Args:
            claims: Claims of a verified access token

        Returns:
            UserResponse with user information

        Raises:
            InvalidTokenError: If the token subject no longer exists
        """
        try:
            user = await self.user_repository.get_by_id(claims.subject)
        except NotFoundError as e:
            raise InvalidTokenError("User not found") from e

        return UserResponse.from_principal(user.to_principal())
