"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain.
Each module provides async data access operations for its corresponding
SQLModel entity models.

All repositories are built on SQLModel for:
- Type-safe ORM operations with Pydantic validation
- Async-first database access patterns
- Consistent CRUD interface via AsyncBaseRepository
- Query building utilities for filtering, search and pagination

Modules:
- base: AsyncBaseRepository interface, SQLModelRepository and QueryBuilder utilities
- admins: Admin account lookups
- services: Service menu listing
- bookings: Booking listing and slot occupancy
- gallery: Gallery listing and bulk deletion
- gallery_categories: Category lookups by slug and name
- nail_options: Nail shape and nail style vocabularies
- banners: Banner listing and primary flag handling
- contacts: Contact inquiry inbox
- expenses: Expense listing and report amounts
- singletons: Business info and hero settings rows
"""

from .admins import AdminRepository
from .banners import BannerRepository
from .base import AsyncBaseRepository, QueryBuilder, SQLModelRepository, escape_like
from .bookings import BookingRepository
from .contacts import ContactRepository
from .expenses import ExpenseRepository
from .gallery import GalleryItemRepository
from .gallery_categories import GalleryCategoryRepository
from .nail_options import NailOptionRepository
from .services import ServiceRepository
from .singletons import BusinessInfoRepository, HeroSettingsRepository

__all__ = [
    "AdminRepository",
    "AsyncBaseRepository",
    "BannerRepository",
    "BookingRepository",
    "BusinessInfoRepository",
    "ContactRepository",
    "ExpenseRepository",
    "GalleryCategoryRepository",
    "GalleryItemRepository",
    "HeroSettingsRepository",
    "NailOptionRepository",
    "QueryBuilder",
    "SQLModelRepository",
    "ServiceRepository",
    "escape_like",
]
