"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from giftshop.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client. The driver connects lazily on first use."""
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the gift shop database from a client."""
    return client[settings.mongo_db_name]
