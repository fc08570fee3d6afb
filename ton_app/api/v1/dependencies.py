# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import AuthenticateTokenUseCase
from ...domain.exceptions import InvalidTokenError
from ...domain.models.token import TokenClaims
from ...di.container import get_container


# auto_error=False so a missing header goes through the shared 401 mapping
security_scheme = HTTPBearer(auto_error=False)


async def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> TokenClaims:
    """
    FastAPI dependency validating the bearer token of a request

    Args:
        credentials: HTTP Bearer token credentials (None if absent)

    Returns:
        Verified TokenClaims

    Raises:
        InvalidTokenError: If the header is missing or the token is invalid
        TokenExpiredError: If the token has expired
    """
    if credentials is None:
        raise InvalidTokenError("Missing bearer token")

    container = get_container()
    authenticate_token_use_case = container.get(AuthenticateTokenUseCase)
    return authenticate_token_use_case.execute(credentials.credentials)
