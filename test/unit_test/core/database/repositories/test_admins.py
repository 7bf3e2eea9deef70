"""Unit tests for the admin account repository with a mocked session."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from pinknail.core.database.entities.admins import Admin
from pinknail.core.database.repositories.admins import AdminRepository


class TestAdminRepository:
    """Tests for AdminRepository lookups."""

    @pytest.fixture
    def mock_session(self):
        session = AsyncMock()
        session.add = MagicMock()
        return session

    @pytest.fixture
    def repository(self, mock_session):
        return AdminRepository(mock_session)

    @pytest.fixture
    def sample_admin(self):
        return Admin(id=1, email="owner@pinknail.com", name="Owner", password_hash="hash")

    async def test_get_by_email_normalizes_input(self, repository, mock_session, sample_admin):
        """Test that the lookup trims and lower-cases the typed email."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = sample_admin
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await repository.get_by_email("  Owner@PinkNail.com ")

        assert result is sample_admin
        stmt = mock_session.execute.call_args[0][0]
        assert "owner@pinknail.com" in stmt.compile().params.values()

    async def test_get_by_email_not_found(self, repository, mock_session):
        mock_result = MagicMock()
        mock_result.scalar_one_or_none.return_value = None
        mock_session.execute = AsyncMock(return_value=mock_result)

        assert await repository.get_by_email("nobody@pinknail.com") is None

    async def test_get_by_email_against_sqlite(self, in_memory_session):
        repository = AdminRepository(in_memory_session)
        await repository.create(Admin(email="owner@pinknail.com", name="Owner", password_hash="hash"))

        found = await repository.get_by_email("OWNER@pinknail.com")

        assert found is not None
        assert found.role == "admin"
        assert found.refresh_token_hash is None
