"""
Request and response schemas for API endpoints.
"""
from giftshop.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from giftshop.schemas.gift import GiftCreate, GiftUpdate, GiftResponse

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # Gift
    "GiftCreate",
    "GiftUpdate",
    "GiftResponse",
]
