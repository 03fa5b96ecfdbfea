"""
Core module - Security primitives and the exception hierarchy.
"""
from giftshop.core.exceptions import (
    GiftShopError,
    InvalidToken,
    TokenExpired,
    Unauthenticated,
    InvalidCredentials,
    DuplicateEmail,
    NotFound,
    GiftNotFound,
    StorageError,
)
from giftshop.core.security import PasswordHasher, TokenIssuer, strip_bearer

__all__ = [
    "GiftShopError",
    "InvalidToken",
    "TokenExpired",
    "Unauthenticated",
    "InvalidCredentials",
    "DuplicateEmail",
    "NotFound",
    "GiftNotFound",
    "StorageError",
    "PasswordHasher",
    "TokenIssuer",
    "strip_bearer",
]
