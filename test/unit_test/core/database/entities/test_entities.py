"""Unit tests for entity defaults and table metadata."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

import pytest
from sqlalchemy import DateTime

from pinknail.core.database.base import Base, utc_now
from pinknail.core.database.entities.admins import Admin
from pinknail.core.database.entities.banners import Banner
from pinknail.core.database.entities.bookings import Booking
from pinknail.core.database.entities.contacts import Contact
from pinknail.core.database.entities.expenses import Expense
from pinknail.core.database.entities.gallery import GalleryItem
from pinknail.core.database.entities.services import Service


class TestTableMetadata:
    """Tests for the registered tables."""

    def test_all_tables_registered(self):
        expected = {
            "admins",
            "services",
            "bookings",
            "gallery_categories",
            "gallery_items",
            "nail_shapes",
            "nail_styles",
            "banners",
            "contacts",
            "business_info",
            "hero_settings",
            "expenses",
        }

        assert expected <= set(Base.metadata.tables)

    @pytest.mark.parametrize(
        ("table", "column"),
        [
            ("admins", "email"),
            ("services", "name"),
            ("gallery_categories", "slug"),
            ("nail_shapes", "value"),
            ("nail_styles", "value"),
        ],
    )
    def test_unique_columns(self, table, column):
        assert Base.metadata.tables[table].c[column].unique is True

    def test_booking_references_service(self):
        foreign_keys = Base.metadata.tables["bookings"].c["service_id"].foreign_keys

        assert {fk.target_fullname for fk in foreign_keys} == {"services.id"}

    def test_timestamp_columns_are_timezone_aware(self):
        """Every created_at/updated_at column stores its UTC offset."""
        columns = [
            column
            for table in Base.metadata.tables.values()
            for column in table.columns
            if column.name in ("created_at", "updated_at")
        ]

        assert len(columns) >= 24
        for column in columns:
            assert isinstance(column.type, DateTime), column
            assert column.type.timezone is True, column

    def test_responded_at_is_timezone_aware(self):
        column_type = Base.metadata.tables["contacts"].c["responded_at"].type

        assert isinstance(column_type, DateTime)
        assert column_type.timezone is True


class TestEntityDefaults:
    """Tests for defaults applied on construction."""

    def test_booking_defaults(self):
        booking = Booking(
            service_id=1,
            date=dt.date(2099, 1, 5),
            time_slot="10:00",
            first_name="Linh",
            last_name="Tran",
            email="linh@example.com",
            phone="5551234567",
        )

        assert booking.status == "pending"
        assert booking.notes is None
        assert booking.customer_name == "Linh Tran"
        assert "status=pending" in repr(booking)

    def test_contact_defaults(self):
        contact = Contact(first_name="Mai", last_name="Le", email="mai@example.com", subject="Hi", message="Hello")

        assert contact.status == "new"
        assert contact.admin_notes is None
        assert contact.responded_at is None

    def test_banner_defaults(self):
        banner = Banner(title="Spring", image_url="https://cdn.example.com/a.jpg")

        assert banner.type == "image"
        assert banner.is_primary is False
        assert banner.active is True

    def test_service_and_gallery_flags(self):
        service = Service(name="Gel", price=40.0, duration=45, category="manicure")
        item = GalleryItem(title="Chrome", image_url="https://cdn.example.com/c.jpg")

        assert (service.featured, service.is_active, service.sort_index) == (False, True, 0)
        assert (item.featured, item.is_active, item.category_id) == (False, True, None)

    def test_admin_defaults(self):
        admin = Admin(email="owner@pinknail.com", name="Owner", password_hash="hash")

        assert admin.role == "admin"
        assert admin.is_active is True
        assert admin.refresh_token_hash is None

    def test_default_timestamps_are_aware(self):
        contact = Contact(first_name="Mai", last_name="Le", email="mai@example.com", subject="Hi", message="Hello")

        assert contact.created_at.tzinfo is dt.timezone.utc
        assert contact.updated_at.tzinfo is dt.timezone.utc

    def test_expense_defaults(self):
        expense = Expense(amount=Decimal("12.50"), category="supplies", date=dt.date(2099, 2, 14))

        assert expense.currency == "USD"
        assert expense.description is None
        assert "amount=12.50" in repr(expense)


def test_utc_now_is_aware():
    now = utc_now()

    assert now.tzinfo is dt.timezone.utc
    assert abs((dt.datetime.now(dt.timezone.utc) - now).total_seconds()) < 5
