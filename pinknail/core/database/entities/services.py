"""
Service entity models.

This module contains the database entity for the salon's service menu.
Each service has a price, a duration in minutes and a menu category, and can
be featured on the landing page or hidden from the public site.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class ServiceBase(Base):
    """Base fields for a salon service."""

    name: str = Field(max_length=120, description="Display name, unique across services")
    description: str = Field(default="", description="Long description shown on the service card")
    price: float = Field(ge=0, description="Price in the salon currency")
    duration: int = Field(ge=15, description="Duration in minutes")
    category: str = Field(max_length=32, index=True, description="Menu category (see ServiceCategory)")
    image_url: Optional[str] = Field(default=None, description="Cover image URL")

    featured: bool = Field(default=False, index=True, description="Highlighted on the landing page")
    is_active: bool = Field(default=True, index=True, description="Visible on the public site")
    sort_index: int = Field(default=0, description="Manual ordering, ascending")


class Service(ServiceBase, table=True):
    """Persistent salon service.

    Table: services
    """

    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=120, unique=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Service(id={self.id}, name={self.name}, category={self.category})"
