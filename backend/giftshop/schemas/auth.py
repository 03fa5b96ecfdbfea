"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email address (must be unique)")
    password: str = Field(..., description="User password")


class LoginRequest(BaseModel):
    """Login request body."""
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class TokenResponse(BaseModel):
    """Response carrying a freshly issued bearer token."""
    token: str = Field(..., description="JWT access token")
