"""
Dependencies for dependency injection in routes.
"""
from giftshop.dependencies.auth import CurrentUserId, get_current_user_id
from giftshop.dependencies.context import get_auth_service, get_context, get_gift_service

__all__ = [
    "CurrentUserId",
    "get_current_user_id",
    "get_auth_service",
    "get_context",
    "get_gift_service",
]
