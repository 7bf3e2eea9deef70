"""
Expense repository.

This module provides data access for bookkeeping expenses: the admin listing
with date-range and category filters, and the per-day amounts the profit
report aggregates.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from pinknail.core.models.domain import ExpenseSortField, SortOrder

from ..entities.expenses import Expense
from .base import QueryBuilder, SQLModelRepository


class ExpenseRepository(SQLModelRepository[Expense]):
    """Repository for expenses using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Expense)

    async def search(
        self,
        *,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
        category: Optional[str] = None,
        sort_by: ExpenseSortField = ExpenseSortField.date,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Expense], int]:
        """List expenses for the admin dashboard.

        Args:
            start_date: Only expenses on or after this day
            end_date: Only expenses on or before this day
            category: Only expenses in this category
            sort_by: Sort key
            sort_order: Sort direction; ties fall back to newest first
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (expenses on the page, total matching expenses)
        """
        stmt = self._in_range(select(Expense), start_date, end_date)
        stmt = QueryBuilder.apply_filters(stmt, Expense, {"category": category})

        column = {
            ExpenseSortField.amount: Expense.amount,
            ExpenseSortField.created_at: Expense.created_at,
        }.get(sort_by, Expense.date)
        ordered = column.asc() if sort_order == SortOrder.asc else column.desc()  # type: ignore
        stmt = stmt.order_by(ordered, Expense.id.desc())  # type: ignore
        return await self.paginate(stmt, page, limit)

    async def amounts_between(self, start_date: dt.date, end_date: dt.date) -> List[Tuple[dt.date, Decimal]]:
        """Return ``(date, amount)`` for every expense in the inclusive range."""
        stmt = self._in_range(select(Expense.date, Expense.amount), start_date, end_date).order_by(Expense.date)
        result = await self.session.execute(stmt)
        return [(row.date, Decimal(str(row.amount))) for row in result.all()]

    @staticmethod
    def _in_range(stmt, start_date: Optional[dt.date], end_date: Optional[dt.date]):
        if start_date is not None:
            stmt = stmt.where(Expense.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(Expense.date <= end_date)
        return stmt
