"""Domain enums shared by entities, I/O models and services."""

from __future__ import annotations

from datetime import date
from enum import Enum


class BookingStatus(str, Enum):
    """
    Lifecycle of an appointment request.

    New bookings always start as ``pending``; staff move them forward from
    the admin dashboard.
    """

    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"

    @classmethod
    def holding_slot(cls) -> tuple["BookingStatus", ...]:
        """Statuses that keep a date/time slot occupied."""
        return (cls.pending, cls.confirmed)


class ServiceCategory(str, Enum):
    """Menu sections of the salon's service list."""

    extensions = "extensions"
    manicure = "manicure"
    nail_art = "nail-art"
    pedicure = "pedicure"
    spa = "spa"


class ContactStatus(str, Enum):
    """Triage state of a contact inquiry."""

    new = "new"
    read = "read"
    responded = "responded"
    archived = "archived"


class BannerType(str, Enum):
    image = "image"
    video = "video"


class HeroDisplayMode(str, Enum):
    """How the landing-page hero area renders its banners."""

    image = "image"
    video = "video"
    carousel = "carousel"


class DayOfWeek(str, Enum):
    """Days used by business hours, in calendar order starting on Monday."""

    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"

    @classmethod
    def from_weekday(cls, weekday: int) -> "DayOfWeek":
        """Map ``date.weekday()`` (Monday is 0) to a day."""
        return list(cls)[weekday]


class AdminRole(str, Enum):
    admin = "admin"
    staff = "staff"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class BookingSortField(str, Enum):
    date = "date"
    created_at = "createdAt"
    customer_name = "customerName"


class ContactSortField(str, Enum):
    created_at = "createdAt"
    status = "status"
    first_name = "firstName"
    last_name = "lastName"


class ExpenseCategory(str, Enum):
    """Bookkeeping categories for salon expenses."""

    supplies = "supplies"
    materials = "materials"
    utilities = "utilities"
    other = "other"


class ExpenseSortField(str, Enum):
    date = "date"
    amount = "amount"
    created_at = "createdAt"


class ReportGrouping(str, Enum):
    """Bucket size of the profit report chart."""

    day = "day"
    week = "week"
    month = "month"

    def bucket(self, value: date) -> str:
        """Label the bucket ``value`` falls into.

        Weeks start on Sunday and are numbered like ``strftime("%U")``.
        """
        if self is ReportGrouping.month:
            return value.strftime("%Y-%m")
        if self is ReportGrouping.week:
            return value.strftime("%Y-W%U")
        return value.isoformat()
