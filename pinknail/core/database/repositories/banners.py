"""
Banner repository.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.banners import Banner
from .base import QueryBuilder, SQLModelRepository


class BannerRepository(SQLModelRepository[Banner]):
    """Repository for landing-page banners using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Banner)

    async def search(
        self,
        *,
        active: Optional[bool] = None,
        is_primary: Optional[bool] = None,
        type: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Banner], int]:
        stmt = select(Banner)
        stmt = QueryBuilder.apply_filters(stmt, Banner, {"active": active, "is_primary": is_primary, "type": type})
        stmt = stmt.order_by(Banner.sort_index.asc(), Banner.created_at.desc())  # type: ignore
        return await self.paginate(stmt, page, limit)

    async def clear_primary(self, keep_id: Optional[int] = None) -> None:
        """Unset ``is_primary`` on every banner except ``keep_id``.

        Changes are staged on the session and persisted by the next commit.

        Args:
            keep_id: Banner that keeps its flag, or None to clear all
        """
        stmt = select(Banner).where(Banner.is_primary == True)  # noqa: E712
        if keep_id is not None:
            stmt = stmt.where(Banner.id != keep_id)
        result = await self.session.execute(stmt)
        for banner in result.scalars().all():
            banner.is_primary = False
            self.session.add(banner)
