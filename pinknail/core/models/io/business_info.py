"""
Business info I/O models for API requests and responses.

Per-field formats are validated here. Rules spanning several fields
(opening before closing, one entry per weekday) are enforced by the
business info service.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from pinknail.core.models.domain import DayOfWeek

from .common import PHONE_PATTERN, CamelModel

CLOCK_TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"


class DaySchedule(CamelModel):
    """Opening hours of one weekday."""

    day: DayOfWeek
    open_time: str = Field(pattern=CLOCK_TIME_PATTERN, description="24-hour HH:MM")
    close_time: str = Field(pattern=CLOCK_TIME_PATTERN, description="24-hour HH:MM")
    closed: bool = False


class BusinessInfoUpdate(CamelModel):
    """Schema for partially updating the business info."""

    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN, max_length=32)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(default=None, min_length=1, max_length=255)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    business_hours: Optional[List[DaySchedule]] = None


class BusinessInfoRead(CamelModel):
    id: int
    phone: str
    email: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    business_hours: List[DaySchedule]
    created_at: datetime
    updated_at: datetime
