"""
Contact inquiry I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from pinknail.core.models.domain import ContactStatus

from .common import PHONE_PATTERN, CamelModel


class ContactCreate(CamelModel):
    """Schema for a message submitted through the public contact form."""

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN, max_length=32)
    subject: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=10, max_length=5000)

    @field_validator("first_name", "last_name", "subject")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class ContactStatusUpdate(CamelModel):
    status: ContactStatus
    admin_notes: Optional[str] = Field(default=None, max_length=1000)


class ContactNotesUpdate(CamelModel):
    admin_notes: str = Field(min_length=1, max_length=1000)


class ContactRead(CamelModel):
    """Schema for reading a contact inquiry."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    status: ContactStatus
    admin_notes: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
