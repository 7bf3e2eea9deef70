"""
Gallery category I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import SLUG_PATTERN, CamelModel


class GalleryCategoryCreate(CamelModel):
    """Schema for creating a gallery category.

    When ``slug`` is omitted it is generated from ``name``.
    """

    name: str = Field(min_length=1, max_length=50)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=64, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    sort_index: int = Field(default=0, ge=0)
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class GalleryCategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = None
    sort_index: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class GalleryCategoryRead(CamelModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    sort_index: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
