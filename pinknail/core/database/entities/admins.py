"""
Admin account entity models.

Admins sign in to the dashboard. Passwords and the current refresh token are
stored as hashes only.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import AdminRole

from ..base import Base, utc_now


class AdminBase(Base):
    """Base fields for an admin account."""

    email: str = Field(max_length=255, description="Login email, stored lower-case")
    name: str = Field(max_length=100)
    role: str = Field(default=AdminRole.admin.value, max_length=16)
    avatar: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)


class Admin(AdminBase, table=True):
    """Table: admins"""

    __tablename__ = "admins"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    refresh_token_hash: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Admin(id={self.id}, email={self.email}, role={self.role})"
