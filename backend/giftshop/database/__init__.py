"""
Database module - MongoDB connection and collection definitions.
"""
from giftshop.database.connections import create_mongo_client, get_database
from giftshop.database import giftshop_db

__all__ = [
    "create_mongo_client",
    "get_database",
    "giftshop_db",
]
