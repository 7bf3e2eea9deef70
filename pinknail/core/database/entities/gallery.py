"""
Gallery entity models.

This module contains the database entity for nail designs shown in the public
gallery. Price and duration are free-form display strings (e.g. ``"$45+"``,
``"60 min"``) rather than the structured values used by services.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class GalleryItemBase(Base):
    """Base fields for a gallery item."""

    image_url: str = Field(description="Image URL")
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None)
    price: Optional[str] = Field(default=None, max_length=50, description="Display price")
    duration: Optional[str] = Field(default=None, max_length=50, description="Display duration")

    featured: bool = Field(default=False, index=True)
    is_active: bool = Field(default=True, index=True)
    sort_index: int = Field(default=0)

    nail_shape: Optional[str] = Field(default=None, max_length=64, index=True, description="NailShape value")
    style: Optional[str] = Field(default=None, max_length=64, index=True, description="NailStyle value")
    category_id: Optional[int] = Field(default=None, foreign_key="gallery_categories.id", index=True)


class GalleryItem(GalleryItemBase, table=True):
    """Persistent gallery item.

    Table: gallery_items
    """

    __tablename__ = "gallery_items"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"GalleryItem(id={self.id}, title={self.title})"
