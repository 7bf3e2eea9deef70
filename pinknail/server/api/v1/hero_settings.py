"""
Hero Settings Endpoints.
"""

from fastapi import APIRouter, Depends

from pinknail.core.models.io import HeroSettingsRead, HeroSettingsUpdate
from pinknail.server.core.security import get_current_admin
from pinknail.server.services.deps import HeroSettingsServiceDep

router = APIRouter(tags=["hero-settings"])


@router.get(
    "",
    response_model=HeroSettingsRead,
    summary="Get Hero Settings",
    description="Return the hero settings, creating the defaults on first access.",
)
async def get_hero_settings(service: HeroSettingsServiceDep) -> HeroSettingsRead:
    return HeroSettingsRead.model_validate(await service.get_or_create())


@router.patch(
    "",
    response_model=HeroSettingsRead,
    dependencies=[Depends(get_current_admin)],
    summary="Update Hero Settings",
    responses={404: {"description": "Hero settings not found"}},
)
async def update_hero_settings(data: HeroSettingsUpdate, service: HeroSettingsServiceDep) -> HeroSettingsRead:
    return HeroSettingsRead.model_validate(await service.update(data))
