"""Initial schema and seed data for the Pink Nail API

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

This is the initial migration that creates all tables and seeds default data:
- Admin accounts
- Service menu and bookings
- Gallery categories, gallery items, nail shapes and nail styles
- Banners, contact inquiries and expenses
- Business info and hero settings singletons

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_NAIL_SHAPES = [
    ("almond", "Almond", "Móng Hạnh Nhân"),
    ("coffin", "Coffin", "Móng Quan Tài"),
    ("square", "Square", "Móng Vuông"),
    ("stiletto", "Stiletto", "Móng Nhọn"),
]

DEFAULT_NAIL_STYLES = [
    ("3d", "3D Art", "Vẽ 3D"),
    ("mirror", "Mirror", "Tráng Gương"),
    ("gem", "Gem", "Đính Đá"),
    ("ombre", "Ombre", "Ombre"),
]

DEFAULT_GALLERY_CATEGORIES = [
    ("All", "all"),
    ("Manicure", "manicure"),
    ("Pedicure", "pedicure"),
    ("Nail Art", "nail-art"),
    ("Extensions", "extensions"),
]

DEFAULT_BUSINESS_HOURS = [
    {"day": "monday", "openTime": "09:00", "closeTime": "19:00", "closed": False},
    {"day": "tuesday", "openTime": "09:00", "closeTime": "19:00", "closed": False},
    {"day": "wednesday", "openTime": "09:00", "closeTime": "19:00", "closed": False},
    {"day": "thursday", "openTime": "09:00", "closeTime": "20:00", "closed": False},
    {"day": "friday", "openTime": "09:00", "closeTime": "20:00", "closed": False},
    {"day": "saturday", "openTime": "10:00", "closeTime": "18:00", "closed": False},
    {"day": "sunday", "openTime": "00:00", "closeTime": "00:00", "closed": True},
]


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables and seed initial data."""

    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("avatar", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("refresh_token_hash", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("sort_index", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_services_name", "services", ["name"], unique=True)
    op.create_index("ix_services_category", "services", ["category"])
    op.create_index("ix_services_featured", "services", ["featured"])
    op.create_index("ix_services_is_active", "services", ["is_active"])
    op.create_index("ix_services_created_at", "services", ["created_at"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("services.id"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time_slot", sa.String(5), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(32), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_bookings_service_id", "bookings", ["service_id"])
    op.create_index("ix_bookings_date", "bookings", ["date"])
    op.create_index("ix_bookings_status", "bookings", ["status"])
    op.create_index("ix_bookings_created_at", "bookings", ["created_at"])

    gallery_categories = op.create_table(
        "gallery_categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(64), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("sort_index", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_gallery_categories_slug", "gallery_categories", ["slug"], unique=True)
    op.create_index("ix_gallery_categories_is_active", "gallery_categories", ["is_active"])
    op.create_index("ix_gallery_categories_created_at", "gallery_categories", ["created_at"])

    op.create_table(
        "gallery_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("price", sa.String(50), nullable=True),
        sa.Column("duration", sa.String(50), nullable=True),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("sort_index", sa.Integer(), nullable=False),
        sa.Column("nail_shape", sa.String(64), nullable=True),
        sa.Column("style", sa.String(64), nullable=True),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("gallery_categories.id"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_gallery_items_featured", "gallery_items", ["featured"])
    op.create_index("ix_gallery_items_is_active", "gallery_items", ["is_active"])
    op.create_index("ix_gallery_items_nail_shape", "gallery_items", ["nail_shape"])
    op.create_index("ix_gallery_items_style", "gallery_items", ["style"])
    op.create_index("ix_gallery_items_category_id", "gallery_items", ["category_id"])
    op.create_index("ix_gallery_items_created_at", "gallery_items", ["created_at"])

    nail_option_tables = {}
    for table_name in ("nail_shapes", "nail_styles"):
        nail_option_tables[table_name] = op.create_table(
            table_name,
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("value", sa.String(64), nullable=False),
            sa.Column("label", sa.String(100), nullable=False),
            sa.Column("label_vi", sa.String(100), nullable=False),
            sa.Column("is_active", sa.Boolean(), nullable=False),
            sa.Column("sort_index", sa.Integer(), nullable=False),
            *_timestamps(),
        )
        op.create_index(f"ix_{table_name}_value", table_name, ["value"], unique=True)
        op.create_index(f"ix_{table_name}_is_active", table_name, ["is_active"])

    op.create_table(
        "banners",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("video_url", sa.String(), nullable=True),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("is_primary", sa.Boolean(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("sort_index", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_banners_is_primary", "banners", ["is_primary"])
    op.create_index("ix_banners_active", "banners", ["active"])
    op.create_index("ix_banners_created_at", "banners", ["created_at"])

    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("subject", sa.String(200), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("admin_notes", sa.String(1000), nullable=True),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_contacts_status", "contacts", ["status"])
    op.create_index("ix_contacts_created_at", "contacts", ["created_at"])

    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("category", sa.String(16), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("currency", sa.String(3), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_expenses_category", "expenses", ["category"])
    op.create_index("ix_expenses_date", "expenses", ["date"])
    op.create_index("ix_expenses_created_at", "expenses", ["created_at"])

    business_info = op.create_table(
        "business_info",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("phone", sa.String(32), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("business_hours", sa.JSON(), nullable=False),
        *_timestamps(),
    )

    hero_settings = op.create_table(
        "hero_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("display_mode", sa.String(16), nullable=False),
        sa.Column("carousel_interval", sa.Integer(), nullable=False),
        sa.Column("show_controls", sa.Boolean(), nullable=False),
        *_timestamps(),
    )

    # Seed data
    now = datetime.now(timezone.utc)
    stamps = {"created_at": now, "updated_at": now}

    for table_name, rows in (("nail_shapes", DEFAULT_NAIL_SHAPES), ("nail_styles", DEFAULT_NAIL_STYLES)):
        op.bulk_insert(
            nail_option_tables[table_name],
            [
                {"value": value, "label": label, "label_vi": label_vi, "is_active": True, "sort_index": index, **stamps}
                for index, (value, label, label_vi) in enumerate(rows)
            ],
        )

    op.bulk_insert(
        gallery_categories,
        [
            {"name": name, "slug": slug, "description": None, "sort_index": index, "is_active": True, **stamps}
            for index, (name, slug) in enumerate(DEFAULT_GALLERY_CATEGORIES)
        ],
    )

    op.bulk_insert(
        business_info,
        [
            {
                "phone": "(555) 123-4567",
                "email": "hello@pinknail.com",
                "address": "123 Beauty Lane, San Francisco, CA 94102",
                "latitude": None,
                "longitude": None,
                "business_hours": DEFAULT_BUSINESS_HOURS,
                **stamps,
            }
        ],
    )

    op.bulk_insert(
        hero_settings,
        [{"display_mode": "carousel", "carousel_interval": 5000, "show_controls": True, **stamps}],
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("hero_settings")
    op.drop_table("business_info")
    op.drop_table("expenses")
    op.drop_table("contacts")
    op.drop_table("banners")
    op.drop_table("nail_styles")
    op.drop_table("nail_shapes")
    op.drop_table("gallery_items")
    op.drop_table("gallery_categories")
    op.drop_table("bookings")
    op.drop_table("services")
    op.drop_table("admins")
