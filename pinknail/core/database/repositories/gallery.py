"""
Gallery item repository.

Data access for the public gallery and its admin management, including
bulk deletion.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.gallery import GalleryItem
from .base import QueryBuilder, SQLModelRepository


class GalleryItemRepository(SQLModelRepository[GalleryItem]):
    """Repository for gallery items using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GalleryItem)

    async def search(
        self,
        *,
        category_id: Optional[int] = None,
        nail_shape: Optional[str] = None,
        style: Optional[str] = None,
        featured: Optional[bool] = None,
        is_active: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[GalleryItem], int]:
        """List gallery items for one page.

        Args:
            category_id: Only items in this gallery category
            nail_shape: Only items tagged with this nail shape value
            style: Only items tagged with this nail style value
            featured: Only (non-)featured items
            is_active: Only visible or only hidden items
            search: Case-insensitive substring of title, description or price
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (items ordered by sort index then newest first, total)
        """
        stmt = select(GalleryItem)
        stmt = QueryBuilder.apply_filters(
            stmt,
            GalleryItem,
            {
                "category_id": category_id,
                "nail_shape": nail_shape,
                "style": style,
                "featured": featured,
                "is_active": is_active,
            },
        )
        stmt = QueryBuilder.apply_search(
            stmt, [GalleryItem.title, GalleryItem.description, GalleryItem.price], search
        )
        stmt = stmt.order_by(GalleryItem.sort_index.asc(), GalleryItem.created_at.desc())  # type: ignore
        return await self.paginate(stmt, page, limit)

    async def count_in_category(self, category_id: int) -> int:
        stmt = select(func.count()).select_from(GalleryItem).where(GalleryItem.category_id == category_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def delete_many(self, ids: Sequence[int]) -> int:
        """Delete every item whose id is in ``ids``.

        Args:
            ids: Gallery item ids; unknown ids are ignored

        Returns:
            Number of deleted rows
        """
        if not ids:
            return 0
        stmt = delete(GalleryItem).where(GalleryItem.id.in_(list(ids)))  # type: ignore
        result = await self.session.execute(stmt)
        await self.session.commit()
        return int(result.rowcount or 0)
