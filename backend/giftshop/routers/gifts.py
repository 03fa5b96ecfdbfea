"""
Gifts router for ownership-scoped gift management.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from giftshop.dependencies.auth import CurrentUserId
from giftshop.dependencies.context import get_gift_service
from giftshop.schemas.gift import GiftCreate, GiftResponse, GiftUpdate
from giftshop.services.gift_service import GiftService

router = APIRouter(prefix="/api/gifts", tags=["Gifts"])


@router.post(
    "",
    response_model=GiftResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create gift",
)
async def create_gift(
    body: GiftCreate,
    current_user_id: CurrentUserId,
    gift_service: GiftService = Depends(get_gift_service),
):
    """
    Create a gift owned by the current user.

    - **title**: Gift title (required)
    - **price**: Price (required)
    - **description**, **category**, **image**: Optional
    """
    return await gift_service.create_gift(current_user_id, body)


@router.get(
    "",
    response_model=list[GiftResponse],
    summary="List gifts",
)
async def list_gifts(
    current_user_id: CurrentUserId,
    gift_service: GiftService = Depends(get_gift_service),
):
    """List all gifts owned by the current user."""
    return await gift_service.list_gifts(current_user_id)


@router.put(
    "/{gift_id}",
    response_model=GiftResponse,
    summary="Update gift",
)
async def update_gift(
    gift_id: str,
    body: GiftUpdate,
    current_user_id: CurrentUserId,
    gift_service: GiftService = Depends(get_gift_service),
):
    """
    Update a gift owned by the current user.

    Returns 404 when the gift does not exist or belongs to someone else.
    """
    return await gift_service.update_gift(gift_id, current_user_id, body)


@router.delete(
    "/{gift_id}",
    response_class=PlainTextResponse,
    summary="Delete gift",
)
async def delete_gift(
    gift_id: str,
    current_user_id: CurrentUserId,
    gift_service: GiftService = Depends(get_gift_service),
):
    """
    Delete a gift owned by the current user.

    **Warning**: This action cannot be undone.
    """
    await gift_service.delete_gift(gift_id, current_user_id)
    return "Gift deleted"
