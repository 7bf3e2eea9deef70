"""
Gallery business logic.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.gallery import GalleryItem
from pinknail.core.database.repositories import GalleryCategoryRepository, GalleryItemRepository
from pinknail.core.exceptions import NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import GalleryItemCreate, GalleryItemUpdate

logger = get_logger(__name__)

# Optional columns that an explicit null clears
CLEARABLE_FIELDS = {"description", "price", "duration", "nail_shape", "style", "category_id"}


class GalleryService:
    """Service for gallery items."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.items = GalleryItemRepository(session)
        self.categories = GalleryCategoryRepository(session)

    async def create(self, data: GalleryItemCreate) -> GalleryItem:
        await self._ensure_categories_exist([data.category_id])
        item = await self.items.create(GalleryItem(**data.model_dump()))
        logger.info(f"Created gallery item {item.id}")
        return item

    async def bulk_create(self, items: Sequence[GalleryItemCreate]) -> List[GalleryItem]:
        """
        Create several gallery items in one transaction.

        Raises:
            NotFoundError: If any item references a missing category; nothing is created
        """
        await self._ensure_categories_exist(item.category_id for item in items)
        created = await self.items.create_many([GalleryItem(**item.model_dump()) for item in items])
        logger.info(f"Bulk created {len(created)} gallery items")
        return created

    async def get(self, item_id: int) -> GalleryItem:
        item = await self.items.get_by_id(item_id)
        if item is None:
            raise NotFoundError(f"Gallery item with ID {item_id} not found")
        return item

    async def list(
        self,
        category_id: Optional[int] = None,
        nail_shape: Optional[str] = None,
        nail_style: Optional[str] = None,
        featured: Optional[bool] = None,
        is_active: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[GalleryItem], int]:
        return await self.items.search(
            category_id=category_id,
            nail_shape=nail_shape,
            style=nail_style,
            featured=featured,
            is_active=is_active,
            search=search,
            page=page,
            limit=limit,
        )

    async def update(self, item_id: int, data: GalleryItemUpdate) -> GalleryItem:
        item = await self.get(item_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("category_id") is not None:
            await self._ensure_categories_exist([changes["category_id"]])

        for key, value in changes.items():
            if value is not None or key in CLEARABLE_FIELDS:
                setattr(item, key, value)
        item = await self.items.update(item)
        logger.info(f"Updated gallery item {item.id}")
        return item

    async def toggle_featured(self, item_id: int) -> GalleryItem:
        item = await self.get(item_id)
        item.featured = not item.featured
        return await self.items.update(item)

    async def delete(self, item_id: int) -> None:
        await self.get(item_id)
        await self.items.delete(item_id)
        logger.info(f"Deleted gallery item {item_id}")

    async def bulk_delete(self, ids: Sequence[int]) -> int:
        """Delete the items with the given ids and return how many existed."""
        deleted = await self.items.delete_many(sorted(set(ids)))
        logger.info(f"Bulk deleted {deleted} gallery items")
        return deleted

    async def _ensure_categories_exist(self, category_ids: Iterable[Optional[int]]) -> None:
        for category_id in {cid for cid in category_ids if cid is not None}:
            if await self.categories.get_by_id(category_id) is None:
                raise NotFoundError(f"Category with ID {category_id} not found")
