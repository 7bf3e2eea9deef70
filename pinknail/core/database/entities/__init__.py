"""
Database entity models.

This package contains all database entity models organized by business domain.
Each module represents a single database table (or a pair of tables sharing
the same columns, as for nail options).

Modules:
- admins: Dashboard admin accounts
- services: Salon service menu
- bookings: Appointment requests (booking -> service)
- gallery_categories: Gallery grouping with generated slugs
- gallery: Gallery items
- nail_options: Nail shape and nail style vocabularies
- banners: Landing-page banners
- contacts: Contact form inquiries
- expenses: Bookkeeping expenses for the profit report
- business_info: Singleton business details and opening hours
- hero_settings: Singleton hero-area display settings
"""

from . import (
    admins,
    banners,
    bookings,
    business_info,
    contacts,
    expenses,
    gallery,
    gallery_categories,
    hero_settings,
    nail_options,
    services,
)

__all__ = [
    "admins",
    "banners",
    "bookings",
    "business_info",
    "contacts",
    "expenses",
    "gallery",
    "gallery_categories",
    "hero_settings",
    "nail_options",
    "services",
]
