"""
Authentication I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from pinknail.core.models.domain import AdminRole

from .common import CamelModel


class AdminRegister(CamelModel):
    """Schema for registering a dashboard admin."""

    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    name: str = Field(min_length=1, max_length=100)
    avatar: Optional[str] = None


class AdminLogin(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    remember_me: bool = False


class RefreshRequest(CamelModel):
    refresh_token: str = Field(min_length=1)


class AdminRead(CamelModel):
    """Schema for reading an admin account. Never exposes hashes."""

    id: int
    email: str
    name: str
    role: AdminRole
    avatar: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Schema returned by register, login and refresh."""

    admin: AdminRead
    access_token: str
    refresh_token: str
