# Standard library imports
import asyncio
import base64
import hashlib
import hmac
import time
from typing import Callable, Optional

# External package imports
import bcrypt
import jwt
from jwt.exceptions import InvalidTokenError as JwtInvalidTokenError

# Local application imports
from ..domain.exceptions import InvalidTokenError, TokenExpiredError
from ..domain.models.token import TokenClaims

# bcrypt only consumes the first 72 bytes of its input, so passwords are
# pre-hashed to a fixed 44-byte value before bcrypt sees them
PASSWORD_PREHASH_KEY = b"ton-api-password-prehash-v1"
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


def _password_bytes(plain_password: str) -> bytes:
    digest = hmac.new(PASSWORD_PREHASH_KEY, plain_password.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest)


class PasswordHasher:
    """
    One-way password hashing with bcrypt.

    Every hash embeds a fresh random salt and the cost factor it was made
    with, so changing the configured rounds never invalidates digests that
    are already stored.
    """

    def __init__(self, rounds: int = 12) -> None:
        if not BCRYPT_MIN_ROUNDS <= rounds <= BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"bcrypt rounds must be between {BCRYPT_MIN_ROUNDS} and {BCRYPT_MAX_ROUNDS}, got {rounds}"
            )
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt

        Args:
            plain_password: The plain text password to hash (may be empty)

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
        return hashed.decode("utf-8")

    def verify(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify a plain password against a hashed password

        The password is re-derived under the salt and cost embedded in the
        digest and compared in constant time by bcrypt.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if passwords match, False otherwise (including malformed digests)
        """
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password),
                hashed_password.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    async def hash_async(self, plain_password: str) -> str:
        """Hash off the event loop; bcrypt is CPU bound"""
        return await asyncio.to_thread(self.hash, plain_password)

    async def verify_async(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        """Verify off the event loop; bcrypt is CPU bound"""
        return await asyncio.to_thread(self.verify, plain_password, hashed_password)


class TokenIssuer:
    """
    Signs and verifies stateless bearer tokens (JWT).

    Validity depends only on the signature and the encoded expiry; there is
    no server-side token store and no revocation.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("JWT secret key cannot be empty")
        if expire_minutes <= 0:
            raise ValueError("Token expiry must be a positive number of minutes")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_seconds = expire_minutes * 60
        self._clock = clock

    def issue(self, subject: str, email: str) -> str:
        """
        Create a JWT token with expiration

        Args:
            subject: The user ID (JWT "sub" claim)
            email: The user's email address

        Returns:
            Encoded JWT token string
        """
        issued_at = int(self._clock())
        expires_at = issued_at + self._expire_seconds

        token_payload = {
            "sub": subject,
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            TokenClaims embedded in the token

        Raises:
            InvalidTokenError: If the token is malformed, badly signed or lacks claims
            TokenExpiredError: If the current time is past the encoded expiry
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
        except JwtInvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        subject = payload.get("sub")
        email = payload.get("email")
        if not isinstance(subject, str) or not subject or not isinstance(email, str):
            raise InvalidTokenError("Invalid token: malformed subject claims")

        try:
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Invalid token: malformed time claims ({e})") from e

        if self._clock() >= expires_at:
            raise TokenExpiredError("Token has expired")

        return TokenClaims(
            subject=subject,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )
