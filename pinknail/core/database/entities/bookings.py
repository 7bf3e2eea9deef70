"""
Booking entity models.

This module contains the database entity for appointment requests submitted
from the public booking page. A booking references one service and holds a
date plus a time slot on the salon's slot grid. Customer contact fields are
stored as flat columns and exposed as a nested ``customerInfo`` object by the
I/O layer.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import BookingStatus

from ..base import Base, utc_now


class BookingBase(Base):
    """Base fields for a booking."""

    service_id: int = Field(foreign_key="services.id", index=True, description="Booked service")
    date: dt.date = Field(index=True, description="Appointment date")
    time_slot: str = Field(max_length=5, description="Slot start time (HH:MM)")

    # Customer contact information
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=32)

    notes: Optional[str] = Field(default=None, description="Special requests from the customer")
    status: str = Field(default=BookingStatus.pending.value, max_length=16, index=True)


class Booking(BookingBase, table=True):
    """Persistent appointment request.

    Table: bookings
    """

    __tablename__ = "bookings"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    @property
    def customer_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"Booking(id={self.id}, date={self.date}, time_slot={self.time_slot}, status={self.status})"
