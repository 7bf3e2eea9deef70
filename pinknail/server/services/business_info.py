"""
Business info business logic.

The salon has a single business info row. Reading it creates the default
row on first access; updating requires the row to exist.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.business_info import BusinessInfo
from pinknail.core.database.repositories import BusinessInfoRepository
from pinknail.core.exceptions import BadRequestError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import DayOfWeek
from pinknail.core.models.io import BusinessInfoUpdate, DaySchedule

logger = get_logger(__name__)

DEFAULT_PHONE = "(555) 123-4567"
DEFAULT_EMAIL = "hello@pinknail.com"
DEFAULT_ADDRESS = "123 Beauty Lane, San Francisco, CA 94102"


def _day(day: DayOfWeek, open_time: str, close_time: str, closed: bool = False) -> Dict[str, Any]:
    return {"day": day.value, "openTime": open_time, "closeTime": close_time, "closed": closed}


DEFAULT_BUSINESS_HOURS: List[Dict[str, Any]] = [
    _day(DayOfWeek.monday, "09:00", "19:00"),
    _day(DayOfWeek.tuesday, "09:00", "19:00"),
    _day(DayOfWeek.wednesday, "09:00", "19:00"),
    _day(DayOfWeek.thursday, "09:00", "20:00"),
    _day(DayOfWeek.friday, "09:00", "20:00"),
    _day(DayOfWeek.saturday, "10:00", "18:00"),
    _day(DayOfWeek.sunday, "00:00", "00:00", closed=True),
]


def validate_business_hours(hours: List[DaySchedule]) -> None:
    """
    Check a full week of opening hours.

    Raises:
        BadRequestError: Unless there are exactly seven entries with distinct
            days and every open day opens before it closes
    """
    if len(hours) != len(DayOfWeek) or len({entry.day for entry in hours}) != len(DayOfWeek):
        raise BadRequestError("Business hours must contain exactly one entry for each of the 7 days")
    for entry in hours:
        if not entry.closed and entry.open_time >= entry.close_time:
            raise BadRequestError(f"Opening time must be before closing time on {entry.day.value}")


class BusinessInfoService:
    """Service for the singleton business info."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = BusinessInfoRepository(session)

    async def get_or_create(self) -> BusinessInfo:
        info = await self.repository.get_first()
        if info is None:
            info = await self.repository.create(
                BusinessInfo(
                    phone=DEFAULT_PHONE,
                    email=DEFAULT_EMAIL,
                    address=DEFAULT_ADDRESS,
                    business_hours=copy.deepcopy(DEFAULT_BUSINESS_HOURS),
                )
            )
            logger.info("Created default business info")
        return info

    async def update(self, data: BusinessInfoUpdate) -> BusinessInfo:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the business info row does not exist yet
            BadRequestError: If the submitted business hours are inconsistent
        """
        info = await self.repository.get_first()
        if info is None:
            raise NotFoundError("Business info not found")

        changes = data.model_dump(exclude_unset=True, exclude={"business_hours"}, mode="json")
        if data.business_hours is not None:
            validate_business_hours(data.business_hours)
            # A new list object so the JSON column is flagged dirty
            info.business_hours = [entry.model_dump(by_alias=True, mode="json") for entry in data.business_hours]

        for key, value in changes.items():
            if value is not None or key in ("latitude", "longitude"):
                setattr(info, key, value)
        info = await self.repository.update(info)
        logger.info(f"Updated business info: {sorted(changes)}")
        return info
