"""
Singleton resource repositories.

Business info and hero settings each hold at most one meaningful row; the
repositories return the oldest row and leave creation of defaults to the
service layer.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.business_info import BusinessInfo
from ..entities.hero_settings import HeroSettings
from .base import SQLModelRepository


class BusinessInfoRepository(SQLModelRepository[BusinessInfo]):
    """Repository for the business info row."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BusinessInfo)

    async def get_first(self) -> Optional[BusinessInfo]:
        stmt = select(BusinessInfo).order_by(BusinessInfo.id.asc()).limit(1)  # type: ignore
        result = await self.session.execute(stmt)
        return result.scalars().first()


class HeroSettingsRepository(SQLModelRepository[HeroSettings]):
    """Repository for the hero settings row."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HeroSettings)

    async def get_first(self) -> Optional[HeroSettings]:
        stmt = select(HeroSettings).order_by(HeroSettings.id.asc()).limit(1)  # type: ignore
        result = await self.session.execute(stmt)
        return result.scalars().first()
