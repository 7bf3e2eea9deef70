"""
Hero settings business logic.
"""

from __future__ import annotations


from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.hero_settings import HeroSettings
from pinknail.core.database.repositories import HeroSettingsRepository
from pinknail.core.exceptions import NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import HeroSettingsUpdate

logger = get_logger(__name__)


class HeroSettingsService:
    """Service for the singleton hero settings."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = HeroSettingsRepository(session)

    async def get_or_create(self) -> HeroSettings:
        settings = await self.repository.get_first()
        if settings is None:
            settings = await self.repository.create(HeroSettings())
            logger.info("Created default hero settings")
        return settings

    async def update(self, data: HeroSettingsUpdate) -> HeroSettings:
        settings = await self.repository.get_first()
        if settings is None:
            raise NotFoundError("Hero settings not found")
        for key, value in data.model_dump(exclude_unset=True, mode="json").items():
            if value is not None:
                setattr(settings, key, value)
        return await self.repository.update(settings)
