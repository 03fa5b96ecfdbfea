"""
Backend-specific test fixtures and helpers.

These fixtures extend the global fixtures with helpers for registering
users and making authenticated requests through the test client.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# Request Helpers
# =============================================================================

@pytest.fixture
def auth_headers():
    """
    Helper building an Authorization header carrying a bearer token.

    Usage:
        client.get("/api/gifts", headers=auth_headers(token))
    """
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def register_user(client):
    """Helper registering a user through the API and returning its token."""
    def _register(user_data: dict) -> str:
        response = client.post("/api/register", json=user_data)
        assert response.status_code == 200, response.text
        return response.json()["token"]
    return _register


# =============================================================================
# Authenticated User Fixtures
# =============================================================================

@pytest.fixture
def alice_token(register_user, alice_data) -> str:
    """Token for a freshly registered Alice."""
    return register_user(alice_data)


@pytest.fixture
def bob_token(register_user, bob_data) -> str:
    """Token for a freshly registered Bob."""
    return register_user(bob_data)


# =============================================================================
# Service Mocks
# =============================================================================

@pytest.fixture
def mock_gift_service():
    """
    Create a fully mocked GiftService.

    All methods are AsyncMock, allowing you to configure side effects:

        mock_gift_service.list_gifts.side_effect = StorageError()
    """
    service = MagicMock()
    service.create_gift = AsyncMock()
    service.list_gifts = AsyncMock()
    service.update_gift = AsyncMock()
    service.delete_gift = AsyncMock()
    return service
