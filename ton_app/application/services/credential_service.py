"""
Credential lifecycle: signup, credential validation and login.

Pure orchestration over the user repository, the password hasher and the
token issuer; the service keeps no state between calls.
"""

# Standard library imports
import logging
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ...core.security import PasswordHasher, TokenIssuer
from ...domain.constants import UserFields
from ...domain.exceptions import EmailConflictError, InvalidCredentialsError
from ...domain.models.user import AuthenticatedPrincipal
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SIGNUP_SUCCESS_MESSAGE = "User created successfully"


@dataclass(frozen=True)
class SignupResult:
    message: str
    user: AuthenticatedPrincipal


@dataclass(frozen=True)
class LoginResult:
    access_token: str
    user: AuthenticatedPrincipal


class CredentialService:
    """Signup and login over the user store"""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def signup(self, name: str, email: str, password: str) -> SignupResult:
        """
        Register a new user

        The email lookup runs before any hashing, so a conflicting request
        never pays for bcrypt.

        Args:
            name: Display name
            email: Email address (must not be registered yet)
            password: Plain text password

        Returns:
            SignupResult with a message and the public view of the user

        Raises:
            EmailConflictError: If a user with this email already exists
        """
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            logger.info("Signup rejected: email already in use")
            raise EmailConflictError("Email already in use")

        password_hash = await self.password_hasher.hash_async(password)

        try:
            new_user = await self.user_repository.create({
                UserFields.NAME: name,
                UserFields.EMAIL: email,
                UserFields.PASSWORD_HASH: password_hash,
            })
        except Exception as e:
            logger.error(f"Error during signup: {e}", exc_info=True)
            raise

        logger.info(f"User {new_user.user_id} signed up")
        return SignupResult(
            message=SIGNUP_SUCCESS_MESSAGE,
            user=new_user.to_principal(),
        )

    async def validate_credentials(self, email: str, password: str) -> Optional[AuthenticatedPrincipal]:
        """
        Check an email/password pair

        Fails closed: a missing user, a user without a password hash, a
        wrong password and any error along the way all give None.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            AuthenticatedPrincipal if the credentials are valid, None otherwise
        """
        try:
            user = await self.user_repository.find_by_email(email)
            if user is None or not user.password_hash:
                return None

            if not await self.password_hasher.verify_async(password, user.password_hash):
                return None

            return user.to_principal()
        except Exception as e:
            logger.error(f"Error during user validation: {e}", exc_info=True)
            return None

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate a user and issue an access token

        Args:
            email: Email address
            password: Plain text password

        Returns:
            LoginResult with the signed token and the public view of the user

        Raises:
            InvalidCredentialsError: For any authentication failure
        """
        principal = await self.validate_credentials(email, password)
        if principal is None:
            raise InvalidCredentialsError("Invalid credentials")

        access_token = self.token_issuer.issue(subject=principal.user_id, email=principal.email)

        logger.info(f"User {principal.user_id} logged in")
        return LoginResult(access_token=access_token, user=principal)
