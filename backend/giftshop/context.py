"""
Long-lived application context.

Built once at startup and stored on ``app.state``; routes reach it through
dependencies instead of module-level globals.
"""
from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from giftshop.config import Settings
from giftshop.core.security import PasswordHasher, TokenIssuer
from giftshop.database.connections import get_database


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    mongo_client: AsyncIOMotorClient
    db: AsyncIOMotorDatabase
    tokens: TokenIssuer
    passwords: PasswordHasher

    @classmethod
    def build(cls, settings: Settings, mongo_client: AsyncIOMotorClient) -> "AppContext":
        return cls(
            settings=settings,
            mongo_client=mongo_client,
            db=get_database(mongo_client, settings),
            tokens=TokenIssuer.from_settings(settings),
            passwords=PasswordHasher(rounds=settings.bcrypt_rounds),
        )
