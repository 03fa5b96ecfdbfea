"""
Global test fixtures for the Gift Shop backend.

This module provides shared fixtures for all tests including:
- Test settings (fast bcrypt, fixed secret, isolated database name)
- Mock MongoDB (mongomock-motor)
- Security primitives built from the test settings
- FastAPI app and test client wired to the mock database
"""
import uuid
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from giftshop.config import Settings
from giftshop.core.security import PasswordHasher, TokenIssuer
from giftshop.database.giftshop_db import create_indexes


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """
    Settings for tests.

    bcrypt runs at its minimum cost and every test gets its own database.
    """
    return Settings(
        _env_file=None,
        mongo_uri="mongodb://test:27017",
        mongo_db_name=f"giftshop_test_{uuid.uuid4().hex[:8]}",
        jwt_secret="test-secret-key",
        jwt_algorithm="HS256",
        jwt_expire_minutes=60,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client, test_settings):
    """Provide the mock gift shop database with indexes like the real app."""
    db = mock_async_mongo_client[test_settings.mongo_db_name]
    await create_indexes(db)
    yield db


# =============================================================================
# Security Fixtures
# =============================================================================

@pytest.fixture
def token_issuer(test_settings) -> TokenIssuer:
    """Token issuer sharing the app's secret."""
    return TokenIssuer.from_settings(test_settings)


@pytest.fixture
def password_hasher(test_settings) -> PasswordHasher:
    """Password hasher at test cost."""
    return PasswordHasher(rounds=test_settings.bcrypt_rounds)


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def alice_data() -> dict:
    """Registration data for the first test user."""
    return {
        "name": "Alice",
        "email": "a@x.com",
        "password": "pw1",
    }


@pytest.fixture
def bob_data() -> dict:
    """Registration data for a second, unrelated test user."""
    return {
        "name": "Bob",
        "email": "b@x.com",
        "password": "pw2",
    }


@pytest.fixture
def gift_data() -> dict:
    """A complete gift body."""
    return {
        "title": "Teddy Bear",
        "description": "A soft brown bear",
        "price": 10,
        "category": "Toys",
        "image": "https://example.com/bear.png",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client):
    """Create the FastAPI app wired to the mock database."""
    from giftshop.main import create_app
    return create_app(settings=test_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, which builds the context and
    creates indexes.
    """
    with TestClient(app) as c:
        yield c
