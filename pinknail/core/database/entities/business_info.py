"""
Business info entity models.

A singleton row with the salon's contact details, map coordinates and weekly
opening hours. The service layer creates it with defaults on first read.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class BusinessInfoBase(Base):
    """Base fields for the salon's business information."""

    phone: str = Field(max_length=32)
    email: str = Field(max_length=255)
    address: str = Field(max_length=255)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class BusinessInfo(BusinessInfoBase, table=True):
    """Table: business_info

    ``business_hours`` holds one ``{"day", "openTime", "closeTime", "closed"}``
    object per weekday, Monday first.
    """

    __tablename__ = "business_info"

    id: Optional[int] = Field(default=None, primary_key=True)
    business_hours: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def hours_for(self, day: str) -> Optional[Dict[str, Any]]:
        """Return the schedule entry for ``day`` (e.g. ``"monday"``)."""
        return next((entry for entry in self.business_hours if entry.get("day") == day), None)
