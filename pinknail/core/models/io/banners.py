"""
Banner I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from pinknail.core.models.domain import BannerType

from .common import HTTP_URL_PATTERN, CamelModel


class BannerCreate(CamelModel):
    """Schema for creating a banner.

    Video banners also need ``videoUrl``; ``imageUrl`` then serves as the poster.
    """

    title: str = Field(min_length=1, max_length=200)
    image_url: str = Field(pattern=HTTP_URL_PATTERN)
    video_url: Optional[str] = Field(default=None, pattern=HTTP_URL_PATTERN)
    type: BannerType = BannerType.image
    is_primary: bool = False
    active: bool = True
    sort_index: int = Field(default=0, ge=0)


class BannerUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    image_url: Optional[str] = Field(default=None, pattern=HTTP_URL_PATTERN)
    video_url: Optional[str] = Field(default=None, pattern=HTTP_URL_PATTERN)
    type: Optional[BannerType] = None
    is_primary: Optional[bool] = None
    active: Optional[bool] = None
    sort_index: Optional[int] = Field(default=None, ge=0)


class BannerRead(CamelModel):
    id: int
    title: str
    image_url: str
    video_url: Optional[str] = None
    type: BannerType
    is_primary: bool
    active: bool
    sort_index: int
    created_at: datetime
    updated_at: datetime
