"""
Exception hierarchy for the gift shop backend.

Services raise these; the application maps each one to an HTTP status and a
plain-text body (see ``giftshop.main.EXCEPTION_MAPPING``).
"""


class GiftShopError(Exception):
    """Base exception for all gift shop errors."""

    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ==================== Tokens ====================


class TokenError(GiftShopError):
    """Base class for token verification failures."""

    default_message = "Invalid token"


class InvalidToken(TokenError):
    """Token is malformed, its signature does not validate, or a claim is missing."""


class TokenExpired(TokenError):
    """Token signature is valid but its expiry has passed."""

    default_message = "Token expired"


class Unauthenticated(GiftShopError):
    """Request to a protected route carries no usable token."""

    default_message = "Invalid token"


# ==================== Credentials ====================


class InvalidCredentials(GiftShopError):
    """Unknown email or wrong password; the two are never distinguished."""

    default_message = "Invalid credentials"


class DuplicateEmail(GiftShopError):
    """Registration hit the unique email index."""

    default_message = "Email already registered"


# ==================== Storage ====================


class NotFound(GiftShopError):
    """Resource does not exist or is not owned by the caller."""

    default_message = "Not found"


class GiftNotFound(NotFound):
    default_message = "Gift not found"


class StorageError(GiftShopError):
    """Any persistence failure other than the ones above."""
