"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from giftshop.context import AppContext
from giftshop.core.exceptions import TokenError, Unauthenticated
from giftshop.core.security import strip_bearer
from giftshop.dependencies.context import get_context

logger = logging.getLogger(__name__)


async def get_current_user_id(
    request: Request,
    context: Annotated[AppContext, Depends(get_context)],
    authorization: Annotated[Optional[str], Header(description="Bearer token")] = None,
) -> str:
    """
    Dependency to get the current user id from the Authorization header.

    Accepts ``Bearer <token>`` or the raw token. The token is verified
    statelessly: no database lookup is made, so a valid token for a user
    that no longer exists is still accepted.

    Raises:
        Unauthenticated: If the header is missing, or the token is invalid or expired
    """
    if not authorization or not authorization.strip():
        raise Unauthenticated("No token provided")

    token = strip_bearer(authorization.strip())

    try:
        user_id = context.tokens.verify(token)
    except TokenError as e:
        logger.debug("Rejected token on %s %s: %s", request.method, request.url.path, e)
        raise Unauthenticated("Invalid token") from e

    request.state.user_id = user_id
    return user_id


# Type alias for cleaner route signatures
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
