"""
Service Menu Endpoints.

Public read access to the salon's service menu and admin management of it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from pinknail.core.models.domain import ServiceCategory
from pinknail.core.models.io import PaginatedResponse, ServiceCreate, ServiceRead, ServiceUpdate
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import ServiceMenuDep

from .pagination import build_page, limit_param, page_param

router = APIRouter(tags=["services"])


@router.post(
    "",
    response_model=ServiceRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
    summary="Create Service",
    description="Add a service to the salon menu.",
    responses={409: {"description": "A service with this name already exists"}},
)
async def create_service(data: ServiceCreate, service: ServiceMenuDep) -> ServiceRead:
    """
    Create a salon service.

    - **price**: Non-negative price.
    - **duration**: Minutes, at least 15.
    - **category**: One of extensions, manicure, nail-art, pedicure, spa.
    """
    return ServiceRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=PaginatedResponse[ServiceRead],
    summary="List Services",
    description="List services ordered by sort index, newest first within the same index.",
)
async def list_services(
    service: ServiceMenuDep,
    category: Optional[ServiceCategory] = None,
    featured: Optional[bool] = None,
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    page: int = page_param(),
    limit: int = limit_param(),
) -> PaginatedResponse[ServiceRead]:
    items, total = await service.list(
        category=category.value if category else None,
        featured=featured,
        is_active=is_active,
        page=page,
        limit=limit,
    )
    return build_page(ServiceRead, items, total, page, limit)


@router.get(
    "/{service_id}",
    response_model=ServiceRead,
    summary="Get Service",
    responses={404: {"description": "Service not found"}},
)
async def get_service(service_id: int, service: ServiceMenuDep) -> ServiceRead:
    return ServiceRead.model_validate(await service.get(service_id))


@router.patch(
    "/{service_id}",
    response_model=ServiceRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Service",
    description="Partially update a service. Only the submitted fields change.",
    responses={404: {"description": "Service not found"}, 409: {"description": "Name already in use"}},
)
async def update_service(service_id: int, data: ServiceUpdate, service: ServiceMenuDep) -> ServiceRead:
    return ServiceRead.model_validate(await service.update(service_id, data))


@router.delete(
    "/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_admin)],
    summary="Delete Service",
    responses={404: {"description": "Service not found"}, 409: {"description": "Service has bookings"}},
)
async def delete_service(service_id: int, service: ServiceMenuDep) -> Response:
    await service.delete(service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
