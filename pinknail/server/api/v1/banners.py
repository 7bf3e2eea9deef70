"""
Banner Endpoints.

Banners drive the landing-page hero area. Only one banner is primary at a time.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.domain import BannerType
from pinknail.core.models.io import BannerCreate, BannerRead, BannerUpdate, PaginatedResponse
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import BannerServiceDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["banners"])


@router.post(
    "",
    response_model=BannerRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
    summary="Create Banner",
    description="Create a banner. Marking it primary unsets the previous primary banner.",
    responses={400: {"description": "Video banner without videoUrl"}},
)
async def create_banner(data: BannerCreate, service: BannerServiceDep) -> BannerRead:
    return BannerRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=PaginatedResponse[BannerRead],
    summary="List Banners",
)
async def list_banners(
    service: BannerServiceDep,
    active: Optional[bool] = None,
    is_primary: Optional[bool] = Query(default=None, alias="isPrimary"),
    banner_type: Optional[BannerType] = Query(default=None, alias="type"),
    page: int = page_param(),
    limit: int = limit_param(),
) -> PaginatedResponse[BannerRead]:
    items, total = await service.list(
        active=active, is_primary=is_primary, type=banner_type, page=page, limit=limit
    )
    return build_page(BannerRead, items, total, page, limit)


@router.get(
    "/{banner_id}",
    response_model=BannerRead,
    summary="Get Banner",
    responses={404: {"description": "Banner not found"}},
)
async def get_banner(banner_id: int, service: BannerServiceDep) -> BannerRead:
    return BannerRead.model_validate(await service.get(banner_id))


@router.patch(
    "/{banner_id}",
    response_model=BannerRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Banner",
    responses={400: {"description": "Video banner without videoUrl"}, 404: {"description": "Banner not found"}},
)
async def update_banner(banner_id: int, data: BannerUpdate, service: BannerServiceDep) -> BannerRead:
    return BannerRead.model_validate(await service.update(banner_id, data))


@router.patch(
    "/{banner_id}/primary",
    response_model=BannerRead,
    dependencies=[Depends(get_current_admin)],
    summary="Set Primary Banner",
    description="Make this banner the only primary banner.",
    responses={404: {"description": "Banner not found"}},
)
async def set_primary_banner(banner_id: int, service: BannerServiceDep) -> BannerRead:
    return BannerRead.model_validate(await service.set_primary(banner_id))


@router.delete(
    "/{banner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)],
    summary="Delete Banner",
    responses={404: {"description": "Banner not found"}},
)
async def delete_banner(banner_id: int, service: BannerServiceDep) -> Response:
    await service.delete(banner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
