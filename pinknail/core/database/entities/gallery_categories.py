"""
Gallery category entity models.

Categories group gallery items on the public gallery page. The ``all``
category is a system default that the gallery page uses as its unfiltered tab.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now

ALL_CATEGORY_SLUG = "all"


class GalleryCategoryBase(Base):
    """Base fields for a gallery category."""

    name: str = Field(max_length=50, description="Display name, unique case-insensitively")
    slug: str = Field(max_length=64, description="URL-safe identifier generated from the name")
    description: Optional[str] = Field(default=None)
    sort_index: int = Field(default=0)
    is_active: bool = Field(default=True, index=True)


class GalleryCategory(GalleryCategoryBase, table=True):
    """Persistent gallery category.

    Table: gallery_categories
    """

    __tablename__ = "gallery_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=64, unique=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"GalleryCategory(id={self.id}, slug={self.slug})"
