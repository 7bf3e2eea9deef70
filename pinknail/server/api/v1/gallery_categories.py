"""
Gallery Category Endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.io import (
    GalleryCategoryCreate,
    GalleryCategoryRead,
    GalleryCategoryUpdate,
    PaginatedResponse,
)
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import GalleryCategoryServiceDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["gallery-categories"])


@router.post(
    "",
    response_model=GalleryCategoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
    summary="Create Gallery Category",
    description="Create a category. The slug is generated from the name when omitted.",
    responses={409: {"description": "Category name or slug already exists"}},
)
async def create_category(data: GalleryCategoryCreate, service: GalleryCategoryServiceDep) -> GalleryCategoryRead:
    return GalleryCategoryRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=PaginatedResponse[GalleryCategoryRead],
    summary="List Gallery Categories",
)
async def list_categories(
    service: GalleryCategoryServiceDep,
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    search: Optional[str] = Query(default=None, max_length=100, description="Case-insensitive match on name or slug"),
    page: int = page_param(),
    limit: int = limit_param(default=100),
) -> PaginatedResponse[GalleryCategoryRead]:
    items, total = await service.list(is_active=is_active, search=search, page=page, limit=limit)
    return build_page(GalleryCategoryRead, items, total, page, limit)


@router.get(
    "/slug/{slug}",
    response_model=GalleryCategoryRead,
    summary="Get Gallery Category by Slug",
    responses={404: {"description": "Category not found"}},
)
async def get_category_by_slug(slug: str, service: GalleryCategoryServiceDep) -> GalleryCategoryRead:
    return GalleryCategoryRead.model_validate(await service.get_by_slug(slug))


@router.get(
    "/{category_id}",
    response_model=GalleryCategoryRead,
    summary="Get Gallery Category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: int, service: GalleryCategoryServiceDep) -> GalleryCategoryRead:
    return GalleryCategoryRead.model_validate(await service.get(category_id))


@router.patch(
    "/{category_id}",
    response_model=GalleryCategoryRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Gallery Category",
    description="Partially update a category. Renaming regenerates the slug.",
    responses={404: {"description": "Category not found"}, 409: {"description": "Name or slug in use"}},
)
async def update_category(
    category_id: int, data: GalleryCategoryUpdate, service: GalleryCategoryServiceDep
) -> GalleryCategoryRead:
    return GalleryCategoryRead.model_validate(await service.update(category_id, data))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)],
    summary="Delete Gallery Category",
    responses={
        400: {"description": "System default category or category still in use"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(category_id: int, service: GalleryCategoryServiceDep) -> Response:
    await service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
