"""Repository tests for banners against in-memory SQLite."""

from __future__ import annotations

import pytest

from pinknail.core.database.entities.banners import Banner
from pinknail.core.database.repositories.banners import BannerRepository


@pytest.fixture
def repository(in_memory_session) -> BannerRepository:
    return BannerRepository(in_memory_session)


async def _primary_ids(repository: BannerRepository) -> set:
    items, _ = await repository.search(is_primary=True, limit=100)
    return {banner.id for banner in items}


class TestBannerRepository:
    """Tests for banner listing and the primary flag."""

    async def test_clear_primary_keeps_one(self, repository, in_memory_session):
        first = await repository.create(Banner(title="Spring", image_url="https://cdn.example.com/a.jpg", is_primary=True))
        second = await repository.create(Banner(title="Summer", image_url="https://cdn.example.com/b.jpg", is_primary=True))

        await repository.clear_primary(keep_id=second.id)
        await in_memory_session.commit()

        assert await _primary_ids(repository) == {second.id}
        assert (await repository.get_by_id(first.id)).is_primary is False

    async def test_clear_primary_without_keep(self, repository, in_memory_session):
        await repository.create(Banner(title="Spring", image_url="https://cdn.example.com/a.jpg", is_primary=True))

        await repository.clear_primary()
        await in_memory_session.commit()

        assert await _primary_ids(repository) == set()

    async def test_search_orders_by_sort_index(self, repository):
        await repository.create(Banner(title="Later", image_url="https://cdn.example.com/a.jpg", sort_index=2))
        await repository.create(Banner(title="Sooner", image_url="https://cdn.example.com/b.jpg", sort_index=1))
        await repository.create(
            Banner(title="Hidden", image_url="https://cdn.example.com/c.jpg", sort_index=0, active=False)
        )

        items, total = await repository.search(active=True)

        assert total == 2
        assert [banner.title for banner in items] == ["Sooner", "Later"]
