"""
Service menu I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from pinknail.core.models.domain import ServiceCategory

from .common import CamelModel


class ServiceCreate(CamelModel):
    """Schema for creating a salon service."""

    name: str = Field(min_length=1, max_length=120)
    description: str = Field(default="", description="Long description shown on the service card")
    price: float = Field(ge=0, description="Price in the salon currency")
    duration: int = Field(ge=15, description="Duration in minutes")
    category: ServiceCategory
    image_url: Optional[str] = Field(default=None, description="Cover image URL")
    featured: bool = False
    is_active: bool = True
    sort_index: int = Field(default=0, ge=0)


class ServiceUpdate(CamelModel):
    """Schema for partially updating a salon service."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=15)
    category: Optional[ServiceCategory] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_index: Optional[int] = Field(default=None, ge=0)


class ServiceRead(CamelModel):
    """Schema for reading a salon service."""

    id: int
    name: str
    description: str
    price: float
    duration: int
    category: ServiceCategory
    image_url: Optional[str] = None
    featured: bool
    is_active: bool
    sort_index: int
    created_at: datetime
    updated_at: datetime
