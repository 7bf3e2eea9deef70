"""Domain enums and I/O models for the Pink Nail API."""

from __future__ import annotations

from .domain import (
    AdminRole,
    BannerType,
    BookingStatus,
    ContactStatus,
    DayOfWeek,
    HeroDisplayMode,
    ServiceCategory,
)

__all__ = [
    "AdminRole",
    "BannerType",
    "BookingStatus",
    "ContactStatus",
    "DayOfWeek",
    "HeroDisplayMode",
    "ServiceCategory",
]
