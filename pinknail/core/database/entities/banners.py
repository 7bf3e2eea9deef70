"""
Banner entity models.

Banners feed the hero area of the landing page. At most one banner is
primary at a time; the service layer enforces this when saving.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import BannerType

from ..base import Base, utc_now


class BannerBase(Base):
    """Base fields for a banner."""

    title: str = Field(min_length=1, max_length=200)
    image_url: str = Field(description="Still image, also used as the video poster")
    video_url: Optional[str] = Field(default=None, description="Video source for video banners")
    type: str = Field(default=BannerType.image.value, max_length=16, description="image or video")
    is_primary: bool = Field(default=False, index=True)
    active: bool = Field(default=True, index=True)
    sort_index: int = Field(default=0)


class Banner(BannerBase, table=True):
    """Table: banners"""

    __tablename__ = "banners"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Banner(id={self.id}, type={self.type}, primary={self.is_primary})"
