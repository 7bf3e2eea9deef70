"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Get current UTC datetime.

    Timestamp columns are declared as ``DateTime(timezone=True)``, so the
    value carries its UTC offset all the way to the database.

    Returns:
        Current timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)
