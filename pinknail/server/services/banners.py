"""
Banner business logic.

At most one banner is primary: whenever a banner is saved as primary the
flag is cleared on every other banner in the same transaction.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.banners import Banner
from pinknail.core.database.repositories import BannerRepository
from pinknail.core.exceptions import BadRequestError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import BannerType
from pinknail.core.models.io import BannerCreate, BannerUpdate

logger = get_logger(__name__)


class BannerService:
    """Service for landing-page banners."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.banners = BannerRepository(session)

    async def create(self, data: BannerCreate) -> Banner:
        """
        Create a banner.

        Raises:
            BadRequestError: If a video banner has no ``videoUrl``
        """
        self._check_video(data.type.value, data.video_url)
        if data.is_primary:
            await self.banners.clear_primary()
        banner = await self.banners.create(Banner(**data.model_dump(mode="json")))
        logger.info(f"Created banner {banner.id} (type={banner.type}, primary={banner.is_primary})")
        return banner

    async def get(self, banner_id: int) -> Banner:
        banner = await self.banners.get_by_id(banner_id)
        if banner is None:
            raise NotFoundError(f"Banner with ID {banner_id} not found")
        return banner

    async def list(
        self,
        active: Optional[bool] = None,
        is_primary: Optional[bool] = None,
        type: Optional[BannerType] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Banner], int]:
        return await self.banners.search(
            active=active, is_primary=is_primary, type=type.value if type else None, page=page, limit=limit
        )

    async def update(self, banner_id: int, data: BannerUpdate) -> Banner:
        banner = await self.get(banner_id)
        changes = data.model_dump(exclude_unset=True, mode="json")
        self._check_video(
            changes.get("type") or banner.type,
            changes["video_url"] if "video_url" in changes else banner.video_url,
        )
        if changes.get("is_primary"):
            await self.banners.clear_primary(keep_id=banner.id)

        for key, value in changes.items():
            if value is not None or key == "video_url":
                setattr(banner, key, value)
        banner = await self.banners.update(banner)
        logger.info(f"Updated banner {banner.id}")
        return banner

    async def set_primary(self, banner_id: int) -> Banner:
        banner = await self.get(banner_id)
        await self.banners.clear_primary(keep_id=banner.id)
        banner.is_primary = True
        return await self.banners.update(banner)

    async def delete(self, banner_id: int) -> None:
        await self.get(banner_id)
        await self.banners.delete(banner_id)
        logger.info(f"Deleted banner {banner_id}")

    @staticmethod
    def _check_video(banner_type: str, video_url: Optional[str]) -> None:
        if banner_type == BannerType.video.value and not video_url:
            raise BadRequestError("Video banners require a videoUrl")
