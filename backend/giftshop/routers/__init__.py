"""
API Routers module.
"""
from giftshop.routers import auth, gifts, health

__all__ = ["auth", "gifts", "health"]
