"""
Service layer for business logic.
"""
from giftshop.services.auth_service import AuthService
from giftshop.services.gift_service import GiftService

__all__ = [
    "AuthService",
    "GiftService",
]
