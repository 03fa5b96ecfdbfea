"""
Security utilities for password hashing and JWT token management.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from giftshop.config import Settings
from giftshop.core.exceptions import InvalidToken, TokenExpired

BEARER_PREFIX = "Bearer "


class PasswordHasher:
    """
    Salted bcrypt hashing with a fixed cost factor.

    bcrypt is CPU-bound, so both operations run in the threadpool to keep
    the event loop free for other requests.
    """

    def __init__(self, rounds: int = 10):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string
        """
        return await run_in_threadpool(self.pwd_context.hash, plain_password)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise
        """
        return await run_in_threadpool(
            self.pwd_context.verify, plain_password, hashed_password
        )


class TokenIssuer:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret_key=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.jwt_expire_minutes),
        )

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Create a JWT access token.

        Args:
            user_id: Unique user identifier
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)

        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
            "jti": uuid.uuid4().hex,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a JWT token.

        Args:
            token: The JWT token string to decode

        Returns:
            Decoded payload dictionary with keys: sub, iat, exp, jti

        Raises:
            TokenExpired: If the signature is valid but the token has expired
            InvalidToken: If the token is malformed or the signature is wrong
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpired() from e
        except JWTError as e:
            raise InvalidToken(str(e)) from e

    def verify(self, token: str) -> str:
        """Return the user id embedded in a valid token."""
        payload = self.decode(token)
        user_id = payload.get("sub")
        if not user_id:
            raise InvalidToken("Token has no subject")
        return user_id


def strip_bearer(authorization: str) -> str:
    """Remove an optional ``Bearer `` scheme prefix from a header value."""
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return authorization
