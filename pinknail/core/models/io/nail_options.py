"""
Nail shape and nail style I/O models.

Both vocabularies share one contract.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import SLUG_PATTERN, CamelModel


class NailOptionCreate(CamelModel):
    """Schema for creating a nail shape or nail style."""

    value: str = Field(min_length=1, max_length=64, pattern=SLUG_PATTERN, description="Lower-case URL-safe slug")
    label: str = Field(min_length=1, max_length=100, description="English label")
    label_vi: str = Field(min_length=1, max_length=100, description="Vietnamese label")
    is_active: bool = True
    sort_index: int = Field(default=0, ge=0)


class NailOptionUpdate(CamelModel):
    value: Optional[str] = Field(default=None, min_length=1, max_length=64, pattern=SLUG_PATTERN)
    label: Optional[str] = Field(default=None, min_length=1, max_length=100)
    label_vi: Optional[str] = Field(default=None, min_length=1, max_length=100)
    is_active: Optional[bool] = None
    sort_index: Optional[int] = Field(default=None, ge=0)


class NailOptionRead(CamelModel):
    id: int
    value: str
    label: str
    label_vi: str
    is_active: bool
    sort_index: int
    created_at: datetime
    updated_at: datetime
