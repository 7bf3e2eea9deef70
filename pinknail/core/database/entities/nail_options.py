"""
Nail option entity models.

Nail shapes and nail styles are small admin-managed vocabularies used to tag
and filter gallery items. Both tables share the same columns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class NailOptionBase(Base):
    """Base fields shared by nail shapes and nail styles."""

    value: str = Field(max_length=64, description="Lower-case slug used as the filter value")
    label: str = Field(max_length=100, description="English label")
    label_vi: str = Field(max_length=100, description="Vietnamese label")
    is_active: bool = Field(default=True, index=True)
    sort_index: int = Field(default=0)


class NailShape(NailOptionBase, table=True):
    """Table: nail_shapes"""

    __tablename__ = "nail_shapes"

    id: Optional[int] = Field(default=None, primary_key=True)
    value: str = Field(max_length=64, unique=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )


class NailStyle(NailOptionBase, table=True):
    """Table: nail_styles"""

    __tablename__ = "nail_styles"

    id: Optional[int] = Field(default=None, primary_key=True)
    value: str = Field(max_length=64, unique=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )
