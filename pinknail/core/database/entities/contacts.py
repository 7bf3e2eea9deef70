"""
Contact inquiry entity models.

This module contains the database entity for messages submitted through the
public contact form, together with the admin triage fields (status, notes and
the time the inquiry was answered).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import ContactStatus

from ..base import Base, utc_now


class ContactBase(Base):
    """Base fields for a contact inquiry."""

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    subject: str = Field(max_length=200)
    message: str = Field(description="Inquiry body")

    status: str = Field(default=ContactStatus.new.value, max_length=16, index=True)
    admin_notes: Optional[str] = Field(default=None, max_length=1000)
    responded_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))


class Contact(ContactBase, table=True):
    """Table: contacts"""

    __tablename__ = "contacts"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Contact(id={self.id}, subject={self.subject}, status={self.status})"
