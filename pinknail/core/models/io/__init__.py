"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts. All of them use
camelCase JSON keys through ``CamelModel``.

Modules:
- common: CamelModel, pagination and list envelopes
- auth: Admin registration, login and token models
- analytics: Profit report models
- services: Service menu models
- bookings: Booking, customer info and availability models
- gallery: Gallery item models including bulk operations
- gallery_categories: Gallery category models
- nail_options: Nail shape and nail style models
- banners: Banner models
- contacts: Contact inquiry models
- expenses: Expense models
- business_info: Business info and opening hours models
- hero_settings: Hero settings models
"""

from .analytics import ChartPoint, ProfitReport
from .auth import AdminLogin, AdminRead, AdminRegister, AuthResponse, RefreshRequest
from .banners import BannerCreate, BannerRead, BannerUpdate
from .bookings import (
    AvailabilityRead,
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
    CustomerInfo,
    TimeSlot,
)
from .business_info import BusinessInfoRead, BusinessInfoUpdate, DaySchedule
from .common import CamelModel, DataResponse, MessageResponse, PaginatedResponse, PaginationMeta
from .contacts import ContactCreate, ContactNotesUpdate, ContactRead, ContactStatusUpdate
from .expenses import ExpenseCreate, ExpenseRead, ExpenseUpdate
from .gallery import (
    BulkDeleteResult,
    GalleryBulkCreate,
    GalleryBulkDelete,
    GalleryItemCreate,
    GalleryItemRead,
    GalleryItemUpdate,
)
from .gallery_categories import GalleryCategoryCreate, GalleryCategoryRead, GalleryCategoryUpdate
from .hero_settings import HeroSettingsRead, HeroSettingsUpdate
from .nail_options import NailOptionCreate, NailOptionRead, NailOptionUpdate
from .services import ServiceCreate, ServiceRead, ServiceUpdate

__all__ = [
    "AdminLogin",
    "AdminRead",
    "AdminRegister",
    "AuthResponse",
    "AvailabilityRead",
    "BannerCreate",
    "BannerRead",
    "BannerUpdate",
    "BookingCreate",
    "BookingRead",
    "BookingStatusUpdate",
    "BulkDeleteResult",
    "BusinessInfoRead",
    "BusinessInfoUpdate",
    "CamelModel",
    "ChartPoint",
    "ContactCreate",
    "ContactNotesUpdate",
    "ContactRead",
    "ContactStatusUpdate",
    "CustomerInfo",
    "DataResponse",
    "DaySchedule",
    "ExpenseCreate",
    "ExpenseRead",
    "ExpenseUpdate",
    "GalleryBulkCreate",
    "GalleryBulkDelete",
    "GalleryCategoryCreate",
    "GalleryCategoryRead",
    "GalleryCategoryUpdate",
    "GalleryItemCreate",
    "GalleryItemRead",
    "GalleryItemUpdate",
    "HeroSettingsRead",
    "HeroSettingsUpdate",
    "MessageResponse",
    "NailOptionCreate",
    "NailOptionRead",
    "NailOptionUpdate",
    "PaginatedResponse",
    "PaginationMeta",
    "ProfitReport",
    "RefreshRequest",
    "ServiceCreate",
    "ServiceRead",
    "ServiceUpdate",
    "TimeSlot",
]
