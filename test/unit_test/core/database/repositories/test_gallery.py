"""Repository tests for gallery items and categories against in-memory SQLite."""

from __future__ import annotations

import pytest

from pinknail.core.database.entities.gallery import GalleryItem
from pinknail.core.database.entities.gallery_categories import GalleryCategory
from pinknail.core.database.repositories.gallery import GalleryItemRepository
from pinknail.core.database.repositories.gallery_categories import GalleryCategoryRepository


@pytest.fixture
def items(in_memory_session) -> GalleryItemRepository:
    return GalleryItemRepository(in_memory_session)


@pytest.fixture
def categories(in_memory_session) -> GalleryCategoryRepository:
    return GalleryCategoryRepository(in_memory_session)


@pytest.fixture
async def category(categories) -> GalleryCategory:
    return await categories.create(GalleryCategory(name="Nail Art", slug="nail-art"))


class TestGalleryItemRepository:
    """Tests for gallery listing and bulk deletion."""

    async def test_delete_many(self, items):
        created = await items.create_many(
            [GalleryItem(title=f"Design {n}", image_url=f"https://cdn.example.com/{n}.jpg") for n in range(3)]
        )

        deleted = await items.delete_many([created[0].id, created[2].id, 9999])

        assert deleted == 2
        remaining, total = await items.search()
        assert total == 1
        assert remaining[0].id == created[1].id

    async def test_delete_many_empty(self, items):
        assert await items.delete_many([]) == 0

    async def test_count_in_category(self, items, category):
        await items.create(GalleryItem(title="Chrome", image_url="https://cdn.example.com/c.jpg", category_id=category.id))
        await items.create(GalleryItem(title="Plain", image_url="https://cdn.example.com/p.jpg"))

        assert await items.count_in_category(category.id) == 1

    async def test_search_filters_and_text(self, items, category):
        await items.create(
            GalleryItem(
                title="Almond Ombre",
                image_url="https://cdn.example.com/1.jpg",
                nail_shape="almond",
                style="ombre",
                category_id=category.id,
                featured=True,
            )
        )
        await items.create(
            GalleryItem(title="Coffin Gem", image_url="https://cdn.example.com/2.jpg", nail_shape="coffin", price="$55+")
        )

        by_shape, total = await items.search(nail_shape="almond")
        assert total == 1
        assert by_shape[0].title == "Almond Ombre"

        _, featured = await items.search(featured=True, category_id=category.id)
        assert featured == 1

        by_price, _ = await items.search(search="$55")
        assert [item.title for item in by_price] == ["Coffin Gem"]


class TestGalleryCategoryRepository:
    """Tests for category lookups."""

    async def test_get_by_slug(self, categories, category):
        assert (await categories.get_by_slug("nail-art")).id == category.id
        assert await categories.get_by_slug("missing") is None

    async def test_get_by_name_ignores_case(self, categories, category):
        found = await categories.get_by_name("  NAIL art ")

        assert found is not None
        assert found.id == category.id

    async def test_search_by_active(self, categories, category):
        await categories.create(GalleryCategory(name="Retired", slug="retired", is_active=False))

        active, total = await categories.search(is_active=True)

        assert total == 1
        assert active[0].slug == "nail-art"
