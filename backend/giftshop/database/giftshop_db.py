"""
Gift shop database configuration.

Structure:
- users: User identity and credentials (unique on email)
- gifts: Gift records, each tagged with its owner's user id
"""
from motor.motor_asyncio import AsyncIOMotorDatabase


class Collections:
    """Collection names in the gift shop database."""
    USERS = "users"
    GIFTS = "gifts"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
        "gifts": [
            {"keys": [("owner_id", 1)]},
        ],
    }


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the gift shop collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
