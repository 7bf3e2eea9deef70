"""
Gallery I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class GalleryItemCreate(CamelModel):
    """Schema for creating a gallery item."""

    image_url: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[str] = Field(default=None, max_length=50, description="Display price, e.g. '$45+'")
    duration: Optional[str] = Field(default=None, max_length=50, description="Display duration, e.g. '60 min'")
    featured: bool = False
    is_active: bool = True
    sort_index: int = Field(default=0, ge=0)
    nail_shape: Optional[str] = Field(default=None, max_length=64)
    style: Optional[str] = Field(default=None, max_length=64)
    category_id: Optional[int] = Field(default=None, gt=0)


class GalleryItemUpdate(CamelModel):
    image_url: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[str] = Field(default=None, max_length=50)
    duration: Optional[str] = Field(default=None, max_length=50)
    featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_index: Optional[int] = Field(default=None, ge=0)
    nail_shape: Optional[str] = Field(default=None, max_length=64)
    style: Optional[str] = Field(default=None, max_length=64)
    category_id: Optional[int] = Field(default=None, gt=0)


class GalleryItemRead(CamelModel):
    """Schema for reading a gallery item."""

    id: int
    image_url: str
    title: str
    description: Optional[str] = None
    price: Optional[str] = None
    duration: Optional[str] = None
    featured: bool
    is_active: bool
    sort_index: int
    nail_shape: Optional[str] = None
    style: Optional[str] = None
    category_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class GalleryBulkCreate(CamelModel):
    items: List[GalleryItemCreate] = Field(min_length=1)


class GalleryBulkDelete(CamelModel):
    ids: List[int] = Field(min_length=1)


class BulkDeleteResult(CamelModel):
    deleted: int
