"""
Booking repository.

This module provides data access for appointment requests, including the
slot-occupancy queries behind duplicate detection and the availability grid,
the admin listing with filters, search and sorting, and the completed-booking
revenue rows behind the profit report.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional, Set, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pinknail.core.models.domain import BookingSortField, BookingStatus, SortOrder

from ..entities.bookings import Booking
from ..entities.services import Service
from .base import QueryBuilder, SQLModelRepository

HOLDING_STATUSES = [status.value for status in BookingStatus.holding_slot()]


class BookingRepository(SQLModelRepository[Booking]):
    """Repository for bookings using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Booking)

    async def find_holding_slot(self, date: dt.date, time_slot: str) -> Optional[Booking]:
        """Find a pending or confirmed booking occupying ``date`` at ``time_slot``.

        Args:
            date: Appointment date
            time_slot: Slot start time (HH:MM)

        Returns:
            The first occupying booking or None when the slot is free
        """
        stmt = (
            select(Booking)
            .where(Booking.date == date)
            .where(Booking.time_slot == time_slot)
            .where(Booking.status.in_(HOLDING_STATUSES))  # type: ignore
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def held_slots(self, date: dt.date) -> Set[str]:
        """Return the time slots on ``date`` that are held by pending or confirmed bookings."""
        stmt = (
            select(Booking.time_slot)
            .where(Booking.date == date)
            .where(Booking.status.in_(HOLDING_STATUSES))  # type: ignore
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def completed_revenue_between(self, start_date: dt.date, end_date: dt.date) -> List[Tuple[dt.date, float]]:
        """Return ``(date, service price)`` for every completed booking in the inclusive range."""
        stmt = (
            select(Booking.date, Service.price)
            .join(Service, Service.id == Booking.service_id)  # type: ignore
            .where(Booking.status == BookingStatus.completed.value)
            .where(Booking.date >= start_date)
            .where(Booking.date <= end_date)
            .order_by(Booking.date)
        )
        result = await self.session.execute(stmt)
        return [(row.date, float(row.price)) for row in result.all()]

    async def count_for_service(self, service_id: int) -> int:
        stmt = select(func.count()).select_from(Booking).where(Booking.service_id == service_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def search(
        self,
        *,
        status: Optional[str] = None,
        service_id: Optional[int] = None,
        date: Optional[dt.date] = None,
        search: Optional[str] = None,
        sort_by: BookingSortField = BookingSortField.date,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Booking], int]:
        """List bookings for the admin dashboard.

        Args:
            status: Only bookings in this status
            service_id: Only bookings of this service
            date: Only bookings on this day
            search: Case-insensitive substring of the customer's name, email or phone
            sort_by: Sort key; ``date`` also orders by time slot and
                ``customerName`` orders by last name then first name
            sort_order: Direction applied to every sort column
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (bookings on the page, total matching bookings)
        """
        stmt = select(Booking)
        stmt = QueryBuilder.apply_filters(
            stmt, Booking, {"status": status, "service_id": service_id, "date": date}
        )
        stmt = QueryBuilder.apply_search(
            stmt, [Booking.first_name, Booking.last_name, Booking.email, Booking.phone], search
        )

        if sort_by == BookingSortField.customer_name:
            columns = [Booking.last_name, Booking.first_name]
        elif sort_by == BookingSortField.created_at:
            columns = [Booking.created_at]
        else:
            columns = [Booking.date, Booking.time_slot]

        direction = "asc" if sort_order == SortOrder.asc else "desc"
        stmt = stmt.order_by(*(getattr(column, direction)() for column in columns))
        return await self.paginate(stmt, page, limit)
