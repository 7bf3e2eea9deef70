"""
Booking I/O models for API requests and responses.

Customer contact fields travel as a nested ``customerInfo`` object on the
wire; entities store them as flat columns, and ``BookingRead.from_entity``
performs the mapping.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from pinknail.core.models.domain import BookingStatus

from .common import MIN_PHONE_DIGITS, PHONE_PATTERN, CamelModel, count_digits

TIME_SLOT_PATTERN = r"^(09|1[0-7]):(00|30)$"


class CustomerInfo(CamelModel):
    """Contact details of the customer who requested the booking."""

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN, max_length=32)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("phone")
    @classmethod
    def enough_digits(cls, value: str) -> str:
        if count_digits(value) < MIN_PHONE_DIGITS:
            raise ValueError(f"phone number must contain at least {MIN_PHONE_DIGITS} digits")
        return value


class BookingCreate(CamelModel):
    """Schema for a booking submitted from the public booking page."""

    service_id: int = Field(gt=0)
    date: dt.date
    time_slot: str = Field(pattern=TIME_SLOT_PATTERN, description="Slot start time (HH:MM)")
    customer_info: CustomerInfo
    notes: Optional[str] = Field(default=None, max_length=500)


class BookingRead(CamelModel):
    """Schema for reading a booking."""

    id: int
    service_id: int
    date: dt.date
    time_slot: str
    customer_info: CustomerInfo
    notes: Optional[str] = None
    status: BookingStatus
    created_at: dt.datetime
    updated_at: dt.datetime

    @classmethod
    def from_entity(cls, booking) -> "BookingRead":
        """Build the wire representation from a ``Booking`` entity."""
        return cls.model_construct(
            id=booking.id,
            service_id=booking.service_id,
            date=booking.date,
            time_slot=booking.time_slot,
            customer_info=CustomerInfo.model_construct(
                first_name=booking.first_name,
                last_name=booking.last_name,
                email=booking.email,
                phone=booking.phone,
            ),
            notes=booking.notes,
            status=BookingStatus(booking.status),
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BookingStatusUpdate(CamelModel):
    status: BookingStatus


class TimeSlot(CamelModel):
    time: str
    available: bool


class AvailabilityRead(CamelModel):
    """Schema for the bookable slots of one day."""

    date: dt.date
    slots: List[TimeSlot]
