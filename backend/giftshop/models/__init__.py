"""
Pydantic models for database documents.
"""
from giftshop.models.user import User
from giftshop.models.gift import Gift

__all__ = [
    "User",
    "Gift",
]
