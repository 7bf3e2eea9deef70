"""
Business Info Endpoints.

The salon's contact details and weekly opening hours, stored as a single row.
"""

from fastapi import APIRouter, Depends

from pinknail.core.models.io import BusinessInfoRead, BusinessInfoUpdate
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import BusinessInfoServiceDep

router = APIRouter(tags=["business-info"])


@router.get(
    "",
    response_model=BusinessInfoRead,
    summary="Get Business Info",
    description="Return the business info, creating the defaults on first access.",
)
async def get_business_info(service: BusinessInfoServiceDep) -> BusinessInfoRead:
    return BusinessInfoRead.model_validate(await service.get_or_create())


@router.patch(
    "",
    response_model=BusinessInfoRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Business Info",
    description="Partially update the business info. Business hours, when sent, must cover all seven days.",
    responses={
        400: {"description": "Inconsistent business hours"},
        404: {"description": "Business info not found"},
    },
)
async def update_business_info(data: BusinessInfoUpdate, service: BusinessInfoServiceDep) -> BusinessInfoRead:
    return BusinessInfoRead.model_validate(await service.update(data))
