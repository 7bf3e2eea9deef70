"""
Shared I/O building blocks.

Every request and response model derives from ``CamelModel`` so that the JSON
contract uses camelCase keys while Python code keeps snake_case attributes.
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SLUG_PATTERN = r"^[a-z0-9-]+$"
HTTP_URL_PATTERN = r"^https?://\S+$"
PHONE_PATTERN = r"^\+?[\d\s\-()]+$"
MIN_PHONE_DIGITS = 10


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases and readable from ORM objects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PaginationMeta(CamelModel):
    total: int = Field(ge=0, description="Number of matching records")
    page: int = Field(ge=1, description="Current 1-based page")
    limit: int = Field(ge=1, description="Page size")
    total_pages: int = Field(ge=0, description="ceil(total / limit)")

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        return cls(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit) if limit else 0)


class PaginatedResponse(CamelModel, Generic[T]):
    """Schema for a page of records plus pagination metadata."""

    data: List[T]
    pagination: PaginationMeta


class DataResponse(CamelModel, Generic[T]):
    """Schema for an unpaginated list wrapped in ``data``."""

    data: List[T]


class MessageResponse(CamelModel):
    message: str


def count_digits(value: str) -> int:
    return sum(ch.isdigit() for ch in value)
