"""
Gallery category business logic.

Categories carry a slug generated from their name. The ``all`` category is
the gallery's unfiltered tab and cannot be deleted, nor can a category that
gallery items still reference.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.gallery_categories import ALL_CATEGORY_SLUG, GalleryCategory
from pinknail.core.database.repositories import GalleryCategoryRepository, GalleryItemRepository
from pinknail.core.exceptions import BadRequestError, ConflictError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.io import GalleryCategoryCreate, GalleryCategoryUpdate

logger = get_logger(__name__)


def generate_slug(name: str) -> str:
    """
    Build a URL-safe slug from a category name.

    Lower-cases and trims the name, turns whitespace runs into ``-``, drops
    anything that is not an ASCII word character or ``-``, then collapses
    repeated hyphens and strips them from both ends.

    >>> generate_slug("  Nail Art & Design ")
    'nail-art-design'
    """
    slug = name.lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w\-]+", "", slug, flags=re.ASCII)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


class GalleryCategoryService:
    """Service for gallery categories."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.categories = GalleryCategoryRepository(session)
        self.items = GalleryItemRepository(session)

    async def create(self, data: GalleryCategoryCreate) -> GalleryCategory:
        """
        Create a category, generating its slug when none is given.

        Raises:
            BadRequestError: If no slug can be derived from the name
            ConflictError: If the name (ignoring case) or the slug is taken
        """
        slug = data.slug or generate_slug(data.name)
        if not slug:
            raise BadRequestError("Category name must contain at least one letter or digit")
        await self._ensure_unique(data.name, slug)

        category = await self.categories.create(
            GalleryCategory(
                name=data.name,
                slug=slug,
                description=data.description,
                sort_index=data.sort_index,
                is_active=data.is_active,
            )
        )
        logger.info(f"Created gallery category {category.id} ({category.slug})")
        return category

    async def get(self, category_id: int) -> GalleryCategory:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category with ID {category_id} not found")
        return category

    async def get_by_slug(self, slug: str) -> GalleryCategory:
        category = await self.categories.get_by_slug(slug)
        if category is None:
            raise NotFoundError(f'Category with slug "{slug}" not found')
        return category

    async def list(
        self, is_active: Optional[bool] = None, search: Optional[str] = None, page: int = 1, limit: int = 100
    ) -> Tuple[List[GalleryCategory], int]:
        return await self.categories.search(is_active=is_active, search=search, page=page, limit=limit)

    async def update(self, category_id: int, data: GalleryCategoryUpdate) -> GalleryCategory:
        """
        Apply a partial update; renaming regenerates the slug.

        Raises:
            NotFoundError: If the category does not exist
            BadRequestError: If the new name yields an empty slug
            ConflictError: If the new name or slug belongs to another category
        """
        category = await self.get(category_id)
        changes = data.model_dump(exclude_unset=True)

        new_name = changes.pop("name", None)
        if new_name is not None and new_name != category.name:
            slug = generate_slug(new_name)
            if not slug:
                raise BadRequestError("Category name must contain at least one letter or digit")
            await self._ensure_unique(new_name, slug, exclude_id=category.id)
            category.name = new_name
            category.slug = slug

        for key, value in changes.items():
            if value is not None or key == "description":
                setattr(category, key, value)
        category = await self.categories.update(category)
        logger.info(f"Updated gallery category {category.id}")
        return category

    async def delete(self, category_id: int) -> None:
        """
        Delete a category.

        Raises:
            NotFoundError: If the category does not exist
            BadRequestError: For the ``all`` category or while gallery items reference it
        """
        category = await self.get(category_id)
        if category.slug == ALL_CATEGORY_SLUG:
            raise BadRequestError('Cannot delete the "all" category (system default)')

        item_count = await self.items.count_in_category(category_id)
        if item_count:
            raise BadRequestError(f"Cannot delete category: {item_count} gallery item(s) reference this category")

        await self.categories.delete(category_id)
        logger.info(f"Deleted gallery category {category_id}")

    async def _ensure_unique(self, name: str, slug: str, exclude_id: Optional[int] = None) -> None:
        by_name = await self.categories.get_by_name(name)
        if by_name is not None and by_name.id != exclude_id:
            raise ConflictError("Category with this name already exists")
        by_slug = await self.categories.get_by_slug(slug)
        if by_slug is not None and by_slug.id != exclude_id:
            raise ConflictError("Category with this slug already exists")
