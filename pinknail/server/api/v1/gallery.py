"""
Gallery Endpoints.

Public browsing of gallery items with category, nail option and text filters,
plus admin management including bulk create and bulk delete.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.io import (
    BulkDeleteResult,
    GalleryBulkCreate,
    GalleryBulkDelete,
    GalleryItemCreate,
    GalleryItemRead,
    GalleryItemUpdate,
    PaginatedResponse,
)
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import GalleryServiceDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["gallery"])


@router.post(
    "",
    response_model=GalleryItemRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
    summary="Create Gallery Item",
    responses={404: {"description": "Category not found"}},
)
async def create_gallery_item(data: GalleryItemCreate, service: GalleryServiceDep) -> GalleryItemRead:
    return GalleryItemRead.model_validate(await service.create(data))


@router.post(
    "/bulk",
    response_model=List[GalleryItemRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
    summary="Bulk Create Gallery Items",
    description="Create several gallery items at once. Nothing is created if any item is invalid.",
    responses={404: {"description": "Category not found"}},
)
async def bulk_create_gallery_items(data: GalleryBulkCreate, service: GalleryServiceDep) -> List[GalleryItemRead]:
    return [GalleryItemRead.model_validate(item) for item in await service.bulk_create(data.items)]


@router.post(
    "/bulk-delete",
    response_model=BulkDeleteResult,
    dependencies=[Depends(get_current_admin)],
    summary="Bulk Delete Gallery Items",
    description="Delete gallery items by id. Unknown ids are ignored.",
)
async def bulk_delete_gallery_items(data: GalleryBulkDelete, service: GalleryServiceDep) -> BulkDeleteResult:
    return BulkDeleteResult(deleted=await service.bulk_delete(data.ids))


@router.get(
    "",
    response_model=PaginatedResponse[GalleryItemRead],
    summary="List Gallery Items",
    description="List gallery items ordered by sort index, newest first within the same index.",
)
async def list_gallery_items(
    service: GalleryServiceDep,
    category_id: Optional[int] = Query(default=None, alias="categoryId"),
    nail_shape: Optional[str] = Query(default=None, alias="nailShape"),
    nail_style: Optional[str] = Query(default=None, alias="nailStyle"),
    featured: Optional[bool] = None,
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    search: Optional[str] = Query(default=None, max_length=100),
    page: int = page_param(),
    limit: int = limit_param(),
) -> PaginatedResponse[GalleryItemRead]:
    """
    List gallery items.

    - **categoryId**: Only items of this gallery category.
    - **nailShape** / **nailStyle**: Only items tagged with this nail option value.
    - **search**: Case-insensitive match on title, description or price.
    """
    items, total = await service.list(
        category_id=category_id,
        nail_shape=nail_shape,
        nail_style=nail_style,
        featured=featured,
        is_active=is_active,
        search=search,
        page=page,
        limit=limit,
    )
    return build_page(GalleryItemRead, items, total, page, limit)


@router.get(
    "/{item_id}",
    response_model=GalleryItemRead,
    summary="Get Gallery Item",
    responses={404: {"description": "Gallery item not found"}},
)
async def get_gallery_item(item_id: int, service: GalleryServiceDep) -> GalleryItemRead:
    return GalleryItemRead.model_validate(await service.get(item_id))


@router.patch(
    "/{item_id}",
    response_model=GalleryItemRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Gallery Item",
    responses={404: {"description": "Gallery item or category not found"}},
)
async def update_gallery_item(item_id: int, data: GalleryItemUpdate, service: GalleryServiceDep) -> GalleryItemRead:
    return GalleryItemRead.model_validate(await service.update(item_id, data))


@router.patch(
    "/{item_id}/featured",
    response_model=GalleryItemRead,
    dependencies=[Depends(get_current_admin)],
    summary="Toggle Featured",
    description="Flip the featured flag of a gallery item.",
    responses={404: {"description": "Gallery item not found"}},
)
async def toggle_gallery_item_featured(item_id: int, service: GalleryServiceDep) -> GalleryItemRead:
    return GalleryItemRead.model_validate(await service.toggle_featured(item_id))


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)],
    summary="Delete Gallery Item",
    responses={404: {"description": "Gallery item not found"}},
)
async def delete_gallery_item(item_id: int, service: GalleryServiceDep) -> Response:
    await service.delete(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
