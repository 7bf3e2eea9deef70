"""Domain enums for the salon data model.

These types are shared between:

- the SQLModel entities stored in the database,
- the I/O models that define the JSON contract,
- the service layer that applies business rules.
"""

from .enums import (
    AdminRole,
    BannerType,
    BookingSortField,
    BookingStatus,
    ContactSortField,
    ContactStatus,
    DayOfWeek,
    ExpenseCategory,
    ExpenseSortField,
    HeroDisplayMode,
    ReportGrouping,
    ServiceCategory,
    SortOrder,
)

__all__ = [
    "AdminRole",
    "BannerType",
    "BookingSortField",
    "BookingStatus",
    "ContactSortField",
    "ContactStatus",
    "DayOfWeek",
    "ExpenseCategory",
    "ExpenseSortField",
    "HeroDisplayMode",
    "ReportGrouping",
    "ServiceCategory",
    "SortOrder",
]
