"""
Admin authentication service.

Registers dashboard admins, verifies credentials and manages the refresh-token
lifecycle. Only a hash of the most recently issued refresh token is stored, so
refreshing rotates both tokens and logging out invalidates the refresh token.
"""

from __future__ import annotations


from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.admins import Admin
from pinknail.core.database.repositories import AdminRepository
from pinknail.core.exceptions import ConflictError, UnauthorizedError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import AdminLogin, AdminRegister
from pinknail.server.core.security import (
    REFRESH_TOKEN_TYPE,
    create_token_pair,
    decode_token,
    hash_secret,
    verify_secret,
)

logger = get_logger(__name__)


class AuthService:
    """Service for admin registration, login and token rotation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.admins = AdminRepository(session)

    async def register(self, data: AdminRegister) -> tuple[Admin, str, str]:
        """
        Register a new admin and sign them in.

        Args:
            data: Registration payload

        Returns:
            Tuple of (admin, access token, refresh token)

        Raises:
            ConflictError: If the email is already registered
        """
        email = data.email.lower()
        if await self.admins.get_by_email(email):
            raise ConflictError("Admin with this email already exists")

        admin = await self.admins.create(
            Admin(
                email=email,
                name=data.name.strip(),
                avatar=data.avatar,
                password_hash=hash_secret(data.password),
            )
        )
        logger.info(f"Registered admin {admin.id} ({admin.email})")
        return await self._issue_tokens(admin)

    async def login(self, data: AdminLogin) -> tuple[Admin, str, str]:
        """
        Verify credentials and issue a token pair.

        Raises:
            UnauthorizedError: For an unknown email, a wrong password or a
                deactivated account
        """
        admin = await self.admins.get_by_email(data.email)
        if admin is None or not verify_secret(data.password, admin.password_hash):
            logger.warning(f"Failed login attempt for {data.email}")
            raise UnauthorizedError("Invalid credentials")
        if not admin.is_active:
            raise UnauthorizedError("Account is deactivated")

        logger.info(f"Admin {admin.id} logged in")
        return await self._issue_tokens(admin, remember_me=data.remember_me)

    async def refresh(self, refresh_token: str) -> tuple[Admin, str, str]:
        """
        Exchange a refresh token for a new token pair.

        The presented token must be the last one issued to the admin.

        Raises:
            UnauthorizedError: If the token is invalid, expired or superseded
        """
        payload = decode_token(refresh_token, REFRESH_TOKEN_TYPE)
        admin = await self.admins.get_by_id(int(payload["sub"]))
        if admin is None or not admin.is_active or not verify_secret(refresh_token, admin.refresh_token_hash):
            raise UnauthorizedError("Invalid refresh token")
        return await self._issue_tokens(admin)

    async def logout(self, admin: Admin) -> None:
        admin.refresh_token_hash = None
        await self.admins.update(admin)
        logger.info(f"Admin {admin.id} logged out")

    async def _issue_tokens(self, admin: Admin, remember_me: bool = False) -> tuple[Admin, str, str]:
        access_token, refresh_token = create_token_pair(admin, remember_me=remember_me)
        admin.refresh_token_hash = hash_secret(refresh_token)
        admin = await self.admins.update(admin)
        return admin, access_token, refresh_token
