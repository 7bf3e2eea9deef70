"""
Service Dependencies.

Provides request-scoped service instances for API endpoints. Every service
shares the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database import get_session

from .analytics import AnalyticsService
from .auth import AuthService
from .banners import BannerService
from .bookings import BookingService
from .business_info import BusinessInfoService
from .contacts import ContactService
from .expenses import ExpenseService
from .gallery import GalleryService
from .gallery_categories import GalleryCategoryService
from .hero_settings import HeroSettingsService
from .nail_options import NailOptionService, nail_shape_service, nail_style_service
from .service_menu import ServiceMenuService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_auth_service(session: SessionDep) -> AuthService:
    return AuthService(session)


def get_service_menu_service(session: SessionDep) -> ServiceMenuService:
    return ServiceMenuService(session)


def get_booking_service(session: SessionDep) -> BookingService:
    return BookingService(session)


def get_gallery_service(session: SessionDep) -> GalleryService:
    return GalleryService(session)


def get_gallery_category_service(session: SessionDep) -> GalleryCategoryService:
    return GalleryCategoryService(session)


def get_nail_shape_service(session: SessionDep) -> NailOptionService:
    return nail_shape_service(session)


def get_nail_style_service(session: SessionDep) -> NailOptionService:
    return nail_style_service(session)


def get_banner_service(session: SessionDep) -> BannerService:
    return BannerService(session)


def get_contact_service(session: SessionDep) -> ContactService:
    return ContactService(session)


def get_expense_service(session: SessionDep) -> ExpenseService:
    return ExpenseService(session)


def get_analytics_service(session: SessionDep) -> AnalyticsService:
    return AnalyticsService(session)


def get_business_info_service(session: SessionDep) -> BusinessInfoService:
    return BusinessInfoService(session)


def get_hero_settings_service(session: SessionDep) -> HeroSettingsService:
    return HeroSettingsService(session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ServiceMenuDep = Annotated[ServiceMenuService, Depends(get_service_menu_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
GalleryCategoryServiceDep = Annotated[GalleryCategoryService, Depends(get_gallery_category_service)]
NailShapeServiceDep = Annotated[NailOptionService, Depends(get_nail_shape_service)]
NailStyleServiceDep = Annotated[NailOptionService, Depends(get_nail_style_service)]
BannerServiceDep = Annotated[BannerService, Depends(get_banner_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
ExpenseServiceDep = Annotated[ExpenseService, Depends(get_expense_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
BusinessInfoServiceDep = Annotated[BusinessInfoService, Depends(get_business_info_service)]
HeroSettingsServiceDep = Annotated[HeroSettingsService, Depends(get_hero_settings_service)]
