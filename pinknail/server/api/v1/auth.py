"""
Authentication Endpoints.

Registration, login, token refresh and logout for dashboard admins. Tokens
are returned in the response body and sent back as ``Authorization: Bearer``.
"""

from fastapi import APIRouter, status

from pinknail.core.models.io import (
    AdminLogin,
    AdminRead,
    AdminRegister,
    AuthResponse,
    MessageResponse,
    RefreshRequest,
)
from pinknail.server.core.security import CurrentAdmin
from pinknail.server.services.deps import AuthServiceDep

router = APIRouter(tags=["auth"])


def _auth_response(admin, access_token: str, refresh_token: str) -> AuthResponse:
    return AuthResponse(
        admin=AdminRead.model_validate(admin),
        access_token=access_token,
        refresh_token=refresh_token,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register Admin",
    description="Create a dashboard admin account and sign it in.",
    responses={
        201: {"description": "Admin registered"},
        409: {"description": "Email already registered"},
    },
)
async def register(data: AdminRegister, service: AuthServiceDep) -> AuthResponse:
    """
    Register a new admin.

    - **email**: Login email, stored lower-case.
    - **password**: At least 8 characters.
    - **name**: Display name.
    """
    return _auth_response(*await service.register(data))


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login",
    description="Exchange admin credentials for an access token and a refresh token.",
    responses={401: {"description": "Invalid credentials or deactivated account"}},
)
async def login(data: AdminLogin, service: AuthServiceDep) -> AuthResponse:
    """
    Sign in an admin.

    With **rememberMe** both tokens stay valid for 30 days.
    """
    return _auth_response(*await service.login(data))


@router.post(
    "/refresh",
    response_model=AuthResponse,
    summary="Refresh Tokens",
    description="Rotate the token pair using the latest refresh token.",
    responses={401: {"description": "Invalid, expired or superseded refresh token"}},
)
async def refresh(data: RefreshRequest, service: AuthServiceDep) -> AuthResponse:
    return _auth_response(*await service.refresh(data.refresh_token))


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Invalidate the current admin's refresh token.",
)
async def logout(admin: CurrentAdmin, service: AuthServiceDep) -> MessageResponse:
    await service.logout(admin)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=AdminRead,
    summary="Current Admin",
    description="Return the admin that owns the access token.",
)
async def me(admin: CurrentAdmin) -> AdminRead:
    return AdminRead.model_validate(admin)
