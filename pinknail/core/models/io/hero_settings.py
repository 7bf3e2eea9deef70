"""
Hero settings I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from pinknail.core.models.domain import HeroDisplayMode

from .common import CamelModel


class HeroSettingsUpdate(CamelModel):
    display_mode: Optional[HeroDisplayMode] = None
    carousel_interval: Optional[int] = Field(default=None, ge=1000, description="Milliseconds")
    show_controls: Optional[bool] = None


class HeroSettingsRead(CamelModel):
    id: int
    display_mode: HeroDisplayMode
    carousel_interval: int
    show_controls: bool
    created_at: datetime
    updated_at: datetime
