"""
Hero settings entity models.

A singleton row controlling how the landing-page hero area renders banners.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import HeroDisplayMode

from ..base import Base, utc_now

DEFAULT_CAROUSEL_INTERVAL_MS = 5000


class HeroSettingsBase(Base):
    display_mode: str = Field(default=HeroDisplayMode.carousel.value, max_length=16)
    carousel_interval: int = Field(default=DEFAULT_CAROUSEL_INTERVAL_MS, ge=1000, description="Milliseconds")
    show_controls: bool = Field(default=True)


class HeroSettings(HeroSettingsBase, table=True):
    """Table: hero_settings"""

    __tablename__ = "hero_settings"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )
