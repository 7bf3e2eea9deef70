"""
Booking Endpoints.

Customers submit appointment requests and check slot availability without
signing in; listing and status changes are reserved for admins.
"""

import datetime as dt
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from pinknail.core.models.domain import BookingSortField, BookingStatus, SortOrder
from pinknail.core.models.io import (
    AvailabilityRead,
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
    PaginatedResponse,
    PaginationMeta,
)
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import BookingServiceDep

from .pagination import limit_param, page_param

router = APIRouter(tags=["bookings"])


@router.post(
    "",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Booking",
    description="Submit an appointment request. New bookings start as pending.",
    responses={
        404: {"description": "Service not found"},
        409: {"description": "Time slot already booked"},
    },
)
async def create_booking(data: BookingCreate, service: BookingServiceDep) -> BookingRead:
    """
    Create a booking.

    - **serviceId**: The booked service.
    - **date**: Appointment date (YYYY-MM-DD).
    - **timeSlot**: Half-hour slot between 09:00 and 17:30.
    - **customerInfo**: First name, last name, email and phone of the customer.
    """
    return BookingRead.from_entity(await service.create(data))


@router.get(
    "/availability",
    response_model=AvailabilityRead,
    summary="Get Availability",
    description="List the day's slots inside business hours and whether each one can still be booked.",
    responses={404: {"description": "Service not found"}},
)
async def get_availability(
    service: BookingServiceDep,
    date: dt.date = Query(description="Day to inspect (YYYY-MM-DD)"),
    service_id: Optional[int] = Query(default=None, alias="serviceId", gt=0),
) -> AvailabilityRead:
    """
    Get bookable slots for a day.

    A closed day returns no slots. Past days report every slot as unavailable.
    When **serviceId** is given, only slots where the whole service fits before
    closing are listed.
    """
    return await service.availability(date, service_id)


@router.get(
    "",
    response_model=PaginatedResponse[BookingRead],
    dependencies=[Depends(get_current_admin)],
    summary="List Bookings",
    description="List bookings with filters, customer search and sorting.",
)
async def list_bookings(
    service: BookingServiceDep,
    booking_status: Optional[BookingStatus] = Query(default=None, alias="status"),
    service_id: Optional[int] = Query(default=None, alias="serviceId"),
    date: Optional[dt.date] = None,
    search: Optional[str] = Query(default=None, max_length=100),
    sort_by: BookingSortField = Query(default=BookingSortField.date, alias="sortBy"),
    sort_order: SortOrder = Query(default=SortOrder.desc, alias="sortOrder"),
    page: int = page_param(),
    limit: int = limit_param(),
) -> PaginatedResponse[BookingRead]:
    """
    List bookings.

    - **status**: Only bookings in this status.
    - **serviceId**: Only bookings of this service.
    - **date**: Only bookings on this day.
    - **search**: Case-insensitive match on customer name, email or phone.
    - **sortBy**: date (then time slot), createdAt, or customerName (last then first name).
    """
    items, total = await service.list(
        status=booking_status,
        service_id=service_id,
        date=date,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[BookingRead](
        data=[BookingRead.from_entity(item) for item in items],
        pagination=PaginationMeta.build(total, page, limit),
    )


@router.get(
    "/{booking_id}",
    response_model=BookingRead,
    dependencies=[Depends(get_current_admin)],
    summary="Get Booking",
    responses={404: {"description": "Booking not found"}},
)
async def get_booking(booking_id: int, service: BookingServiceDep) -> BookingRead:
    return BookingRead.from_entity(await service.get(booking_id))


@router.patch(
    "/{booking_id}/status",
    response_model=BookingRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Booking Status",
    responses={404: {"description": "Booking not found"}},
)
async def update_booking_status(
    booking_id: int, data: BookingStatusUpdate, service: BookingServiceDep
) -> BookingRead:
    return BookingRead.from_entity(await service.update_status(booking_id, data.status))
