"""
Nail option repository.

Nail shapes and nail styles share their columns, so one repository class
serves both tables; pick the table by passing the entity class.
"""

from __future__ import annotations

from typing import List, Optional, Type, Union

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.nail_options import NailShape, NailStyle
from .base import QueryBuilder, SQLModelRepository

NailOption = Union[NailShape, NailStyle]


class NailOptionRepository(SQLModelRepository[NailOption]):
    """Repository for the nail shape or nail style table."""

    def __init__(self, session: AsyncSession, model: Type[NailOption]) -> None:
        """Initialize repository for one nail option table.

        Args:
            session: Async session for database operations
            model: ``NailShape`` or ``NailStyle``
        """
        super().__init__(session, model)

    async def get_by_value(self, value: str) -> Optional[NailOption]:
        stmt = select(self.model).where(self.model.value == value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_ordered(self, is_active: Optional[bool] = None) -> List[NailOption]:
        """List options ordered by sort index, oldest first within the same index."""
        stmt = select(self.model)
        stmt = QueryBuilder.apply_filters(stmt, self.model, {"is_active": is_active})
        stmt = stmt.order_by(self.model.sort_index.asc(), self.model.created_at.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
