"""
Tests for database connections and initialization.

These tests cover:
- MongoDB client creation
- Index creation
- Application lifespan wiring
"""
import pytest
from unittest.mock import MagicMock, patch
from pymongo.errors import DuplicateKeyError


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    def test_create_mongo_client_uses_configured_uri(self, test_settings):
        """create_mongo_client should connect to settings.mongo_uri."""
        with patch("giftshop.database.connections.AsyncIOMotorClient") as mock_client:
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            from giftshop.database.connections import create_mongo_client

            client = create_mongo_client(test_settings)

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert client is mock_instance

    def test_get_database_uses_configured_name(self, test_settings):
        from giftshop.database.connections import get_database

        client = MagicMock()
        db = get_database(client, test_settings)

        client.__getitem__.assert_called_once_with(test_settings.mongo_db_name)
        assert db is client.__getitem__.return_value


class TestIndexes:
    """Tests for index creation."""

    @pytest.mark.asyncio
    async def test_email_index_is_unique(self, mock_db):
        """Inserting two users with the same email should fail."""
        await mock_db.users.insert_one({"email": "a@x.com"})

        with pytest.raises(DuplicateKeyError):
            await mock_db.users.insert_one({"email": "a@x.com"})

    @pytest.mark.asyncio
    async def test_create_indexes_is_idempotent(self, mock_db):
        """Running index creation again on startup should not fail."""
        from giftshop.database.giftshop_db import create_indexes

        await create_indexes(mock_db)

        await mock_db.users.insert_one({"email": "a@x.com"})
        with pytest.raises(DuplicateKeyError):
            await mock_db.users.insert_one({"email": "a@x.com"})


class TestLifespan:
    """Tests for application startup and shutdown."""

    def test_startup_builds_context(self, client, app, test_settings):
        """Entering the app should attach a context built from the settings."""
        context = app.state.context

        assert context.settings is test_settings
        assert context.tokens.secret_key == test_settings.jwt_secret

    def test_injected_client_is_not_closed(self, app, mock_async_mongo_client):
        """A client passed in by the caller stays owned by the caller."""
        from fastapi.testclient import TestClient

        mock_async_mongo_client.close = MagicMock()

        with TestClient(app):
            pass

        mock_async_mongo_client.close.assert_not_called()

    def test_owned_client_is_closed_on_shutdown(self, test_settings):
        """A client created by the app is closed when the app shuts down."""
        from fastapi.testclient import TestClient
        from mongomock_motor import AsyncMongoMockClient
        from giftshop.main import create_app

        owned_client = AsyncMongoMockClient()
        owned_client.close = MagicMock()

        with patch("giftshop.main.create_mongo_client", return_value=owned_client):
            with TestClient(create_app(settings=test_settings)):
                pass

        owned_client.close.assert_called_once()

    def test_startup_fails_without_indexes(self, app):
        """
        Without the unique email index duplicate registrations would slip
        through, so a failed index build must stop startup.
        """
        from fastapi.testclient import TestClient
        from pymongo.errors import ServerSelectionTimeoutError

        with patch(
            "giftshop.main.create_indexes",
            side_effect=ServerSelectionTimeoutError("no servers"),
        ):
            with pytest.raises(ServerSelectionTimeoutError):
                with TestClient(app) as client:
                    client.post(
                        "/api/register",
                        json={"name": "Alice", "email": "a@x.com", "password": "pw1"},
                    )
