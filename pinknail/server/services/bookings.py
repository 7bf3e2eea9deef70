"""
Booking business logic.

Creates appointment requests with the same-slot duplicate check, drives the
admin status workflow and computes the public availability grid.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.base import utc_now
from pinknail.core.database.entities.bookings import Booking
from pinknail.core.database.repositories import (
    BookingRepository,
    BusinessInfoRepository,
    ServiceRepository,
)
from pinknail.core.exceptions import ConflictError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import BookingSortField, BookingStatus, DayOfWeek, SortOrder
from pinknail.core.models.io import AvailabilityRead, BookingCreate, TimeSlot
from pinknail.core.monitoring import log_booking_created
from pinknail.server.core.config import settings

from .availability import build_slot_grid, slots_within_hours
from .business_info import DEFAULT_BUSINESS_HOURS

logger = get_logger(__name__)

SLOT_TAKEN_MESSAGE = "This time slot is already booked. Please choose another time."


class BookingService:
    """Service for appointment requests."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.bookings = BookingRepository(session)
        self.services = ServiceRepository(session)
        self.business_info = BusinessInfoRepository(session)

    async def create(self, data: BookingCreate) -> Booking:
        """
        Create a pending booking.

        Args:
            data: Booking submitted from the public site

        Returns:
            The persisted booking

        Raises:
            NotFoundError: If the referenced service does not exist
            ConflictError: If a pending or confirmed booking holds the same date and slot
        """
        if await self.services.get_by_id(data.service_id) is None:
            raise NotFoundError(f"Service with ID {data.service_id} not found")

        if await self.bookings.find_holding_slot(data.date, data.time_slot):
            logger.info(f"Rejected booking for taken slot {data.date} {data.time_slot}")
            raise ConflictError(SLOT_TAKEN_MESSAGE)

        customer = data.customer_info
        booking = await self.bookings.create(
            Booking(
                service_id=data.service_id,
                date=data.date,
                time_slot=data.time_slot,
                first_name=customer.first_name,
                last_name=customer.last_name,
                email=str(customer.email),
                phone=customer.phone,
                notes=data.notes,
                status=BookingStatus.pending.value,
            )
        )
        logger.info(f"Created booking {booking.id} for {booking.date} {booking.time_slot}")
        log_booking_created(booking.id, booking.service_id, booking.date.isoformat(), booking.time_slot)
        return booking

    async def get(self, booking_id: int) -> Booking:
        booking = await self.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking with ID {booking_id} not found")
        return booking

    async def list(
        self,
        status: Optional[BookingStatus] = None,
        service_id: Optional[int] = None,
        date: Optional[dt.date] = None,
        search: Optional[str] = None,
        sort_by: BookingSortField = BookingSortField.date,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Booking], int]:
        return await self.bookings.search(
            status=status.value if status else None,
            service_id=service_id,
            date=date,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )

    async def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        booking = await self.get(booking_id)
        previous = booking.status
        booking.status = status.value
        booking = await self.bookings.update(booking)
        logger.info(f"Booking {booking_id} status {previous} -> {booking.status}")
        return booking

    async def availability(self, date: dt.date, service_id: Optional[int] = None) -> AvailabilityRead:
        """
        Compute the bookable slots of one day.

        Slots come from the configured grid, limited to the day's opening
        hours. With ``service_id`` the service duration must also fit before
        closing. Slots held by pending or confirmed bookings, and every slot
        of a past day, are reported as unavailable.

        Args:
            date: Day to inspect
            service_id: Optional service whose duration must fit

        Returns:
            The day's slots with their availability

        Raises:
            NotFoundError: If ``service_id`` does not exist
        """
        booking_config = settings.booking
        duration = booking_config.slot_interval_minutes
        if service_id is not None:
            service = await self.services.get_by_id(service_id)
            if service is None:
                raise NotFoundError(f"Service with ID {service_id} not found")
            duration = service.duration

        info = await self.business_info.get_first()
        hours = info.business_hours if info is not None else DEFAULT_BUSINESS_HOURS
        day = DayOfWeek.from_weekday(date.weekday()).value
        schedule = next((entry for entry in hours if entry.get("day") == day), None)

        grid = build_slot_grid(
            booking_config.first_slot, booking_config.last_slot, booking_config.slot_interval_minutes
        )
        open_slots = slots_within_hours(grid, schedule, duration)

        if date < utc_now().date():
            return AvailabilityRead(date=date, slots=[TimeSlot(time=slot, available=False) for slot in open_slots])

        held = await self.bookings.held_slots(date)
        return AvailabilityRead(
            date=date,
            slots=[TimeSlot(time=slot, available=slot not in held) for slot in open_slots],
        )
