"""
Gift service for ownership-scoped gift management.

Every query filters on ``owner_id``, so a gift owned by someone else looks
exactly like a gift that does not exist.
"""
import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from giftshop.core.exceptions import GiftNotFound, StorageError
from giftshop.database.giftshop_db import Collections
from giftshop.models.gift import Gift
from giftshop.schemas.gift import GiftCreate, GiftResponse, GiftUpdate

logger = logging.getLogger(__name__)


class GiftService:
    """Service for gift CRUD operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the gift shop database."""
        self.db = db
        self.gifts = db[Collections.GIFTS]

    async def create_gift(self, owner_id: str, request: GiftCreate) -> GiftResponse:
        """Create a new gift owned by the caller."""
        gift = Gift(owner_id=owner_id, **request.model_dump())
        gift_doc = gift.model_dump(exclude={"id"})

        try:
            result = await self.gifts.insert_one(gift_doc)
        except PyMongoError as e:
            logger.exception("Failed to create gift for user %s", owner_id)
            raise StorageError() from e

        gift_doc["_id"] = result.inserted_id
        return self._gift_to_response(gift_doc)

    async def list_gifts(self, owner_id: str) -> list[GiftResponse]:
        """List all gifts owned by the caller, in storage order."""
        try:
            cursor = self.gifts.find({"owner_id": owner_id})
            gifts = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.exception("Failed to list gifts for user %s", owner_id)
            raise StorageError() from e

        return [self._gift_to_response(g) for g in gifts]

    async def update_gift(
        self, gift_id: str, owner_id: str, request: GiftUpdate
    ) -> GiftResponse:
        """
        Replace the fields present in the request on a gift owned by the caller.

        Raises:
            GiftNotFound: If no gift with this id belongs to the caller
            StorageError: If the update fails
        """
        query = self._owned_query(gift_id, owner_id)
        update_data = request.model_dump(exclude_unset=True)

        try:
            if not update_data:
                result = await self.gifts.find_one(query)
            else:
                result = await self.gifts.find_one_and_update(
                    query,
                    {"$set": update_data},
                    return_document=ReturnDocument.AFTER,
                )
        except PyMongoError as e:
            logger.exception("Failed to update gift %s", gift_id)
            raise StorageError() from e

        if not result:
            raise GiftNotFound()

        return self._gift_to_response(result)

    async def delete_gift(self, gift_id: str, owner_id: str) -> None:
        """
        Delete a gift owned by the caller.

        Raises:
            GiftNotFound: If no gift with this id belongs to the caller
            StorageError: If the delete fails
        """
        query = self._owned_query(gift_id, owner_id)

        try:
            result = await self.gifts.delete_one(query)
        except PyMongoError as e:
            logger.exception("Failed to delete gift %s", gift_id)
            raise StorageError() from e

        if result.deleted_count == 0:
            raise GiftNotFound()

        logger.info("User %s deleted gift %s", owner_id, gift_id)

    # ==================== Helpers ====================

    @staticmethod
    def _owned_query(gift_id: str, owner_id: str) -> dict:
        # Malformed ids can never match, same as another owner's id
        if not ObjectId.is_valid(gift_id):
            raise GiftNotFound()
        return {"_id": ObjectId(gift_id), "owner_id": owner_id}

    @staticmethod
    def _gift_to_response(doc: dict) -> GiftResponse:
        return GiftResponse(
            id=str(doc["_id"]),
            title=doc["title"],
            description=doc.get("description"),
            price=doc["price"],
            category=doc.get("category"),
            image=doc.get("image"),
            owner_id=doc["owner_id"],
        )
