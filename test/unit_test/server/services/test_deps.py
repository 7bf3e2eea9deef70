"""Unit tests for server services dependencies.

Tests verify that every ``*Dep`` alias resolves to the matching provider and
that providers build their service around the request session.
"""

from unittest.mock import AsyncMock

import pytest

from pinknail.core.database import get_session
from pinknail.core.database.entities.nail_options import NailShape, NailStyle
from pinknail.server.services import deps
from pinknail.server.services.analytics import AnalyticsService
from pinknail.server.services.auth import AuthService
from pinknail.server.services.banners import BannerService
from pinknail.server.services.bookings import BookingService
from pinknail.server.services.business_info import BusinessInfoService
from pinknail.server.services.contacts import ContactService
from pinknail.server.services.expenses import ExpenseService
from pinknail.server.services.gallery import GalleryService
from pinknail.server.services.gallery_categories import GalleryCategoryService
from pinknail.server.services.hero_settings import HeroSettingsService
from pinknail.server.services.nail_options import NailOptionService
from pinknail.server.services.service_menu import ServiceMenuService

PROVIDERS = [
    (deps.AuthServiceDep, deps.get_auth_service, AuthService),
    (deps.ServiceMenuDep, deps.get_service_menu_service, ServiceMenuService),
    (deps.BookingServiceDep, deps.get_booking_service, BookingService),
    (deps.GalleryServiceDep, deps.get_gallery_service, GalleryService),
    (deps.GalleryCategoryServiceDep, deps.get_gallery_category_service, GalleryCategoryService),
    (deps.NailShapeServiceDep, deps.get_nail_shape_service, NailOptionService),
    (deps.NailStyleServiceDep, deps.get_nail_style_service, NailOptionService),
    (deps.BannerServiceDep, deps.get_banner_service, BannerService),
    (deps.ContactServiceDep, deps.get_contact_service, ContactService),
    (deps.ExpenseServiceDep, deps.get_expense_service, ExpenseService),
    (deps.AnalyticsServiceDep, deps.get_analytics_service, AnalyticsService),
    (deps.BusinessInfoServiceDep, deps.get_business_info_service, BusinessInfoService),
    (deps.HeroSettingsServiceDep, deps.get_hero_settings_service, HeroSettingsService),
]


class TestServiceDeps:
    """Test the Annotated dependency aliases."""

    @pytest.mark.parametrize("alias, provider, service_cls", PROVIDERS)
    def test_dep_is_annotated_with_provider(self, alias, provider, service_cls):
        """Test each alias is Annotated with Depends(provider)."""
        assert hasattr(alias, "__metadata__")
        depends_obj = alias.__metadata__[0]
        assert depends_obj.dependency is provider

    @pytest.mark.parametrize("alias, provider, service_cls", PROVIDERS)
    def test_provider_builds_service_on_session(self, alias, provider, service_cls):
        """Test each provider returns its service bound to the given session."""
        session = AsyncMock()

        service = provider(session)

        assert isinstance(service, service_cls)
        assert service.session is session

    def test_session_dep_uses_get_session(self):
        """Test SessionDep resolves through get_session."""
        assert deps.SessionDep.__metadata__[0].dependency is get_session

    def test_nail_option_providers_target_their_tables(self):
        """Test nail shape and nail style providers use separate tables."""
        session = AsyncMock()

        assert deps.get_nail_shape_service(session).model is NailShape
        assert deps.get_nail_style_service(session).model is NailStyle
