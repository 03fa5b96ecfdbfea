"""
Dependencies exposing the application context and services to routes.
"""
from typing import Annotated

from fastapi import Depends, Request

from giftshop.context import AppContext
from giftshop.services.auth_service import AuthService
from giftshop.services.gift_service import GiftService


def get_context(request: Request) -> AppContext:
    """Return the context built by the application lifespan."""
    return request.app.state.context


def get_auth_service(
    context: Annotated[AppContext, Depends(get_context)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(context.db, context.tokens, context.passwords)


def get_gift_service(
    context: Annotated[AppContext, Depends(get_context)],
) -> GiftService:
    """Dependency to get GiftService instance."""
    return GiftService(context.db)
