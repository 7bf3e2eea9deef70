"""
Admin account repository.

Lookups used by the authentication flow. Emails are compared lower-case.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.admins import Admin
from .base import SQLModelRepository


class AdminRepository(SQLModelRepository[Admin]):
    """Repository for admin accounts."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Admin)

    async def get_by_email(self, email: str) -> Optional[Admin]:
        """Get an admin by login email.

        Args:
            email: Email as typed by the user

        Returns:
            Admin instance or None
        """
        stmt = select(Admin).where(Admin.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
