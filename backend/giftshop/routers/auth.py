"""
Authentication router for registration and login.
"""
from fastapi import APIRouter, Depends, status

from giftshop.dependencies.context import get_auth_service
from giftshop.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from giftshop.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account and receive a token.

    - **name**: Display name
    - **email**: Email address (must be unique)
    - **password**: Password
    """
    return await auth_service.register_user(body)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    Pass the token to protected endpoints as `Authorization: Bearer <token>`.
    """
    return await auth_service.login(body)
