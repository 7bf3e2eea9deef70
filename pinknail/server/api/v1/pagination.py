"""Helpers shared by the paginated list endpoints."""

from typing import Iterable, Type, TypeVar

from fastapi import Query
from pydantic import BaseModel

from pinknail.core.models.io import PaginatedResponse, PaginationMeta

ReadModel = TypeVar("ReadModel", bound=BaseModel)

MAX_PAGE_SIZE = 100


def page_param():
    return Query(default=1, ge=1, description="1-based page number")


def limit_param(default: int = 10):
    return Query(default=default, ge=1, le=MAX_PAGE_SIZE, description="Page size")


def build_page(
    read_model: Type[ReadModel], items: Iterable, total: int, page: int, limit: int
) -> PaginatedResponse[ReadModel]:
    """Wrap one page of entities in the ``{data, pagination}`` envelope."""
    return PaginatedResponse[read_model](
        data=[read_model.model_validate(item) for item in items],
        pagination=PaginationMeta.build(total, page, limit),
    )
