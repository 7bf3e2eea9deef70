"""
Expense bookkeeping business logic.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.entities.expenses import Expense
from pinknail.core.database.repositories import ExpenseRepository
from pinknail.core.exceptions import BadRequestError, NotFoundError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import ExpenseSortField, SortOrder
from pinknail.core.models.io import ExpenseCreate, ExpenseUpdate

logger = get_logger(__name__)


class ExpenseService:
    """Service for recording and listing salon expenses."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.expenses = ExpenseRepository(session)

    async def create(self, data: ExpenseCreate) -> Expense:
        expense = Expense(
            date=data.date,
            category=data.category.value,
            amount=Decimal(data.amount),
            description=data.description,
            currency=data.currency,
        )
        expense = await self.expenses.create(expense)
        logger.info(f"Recorded expense {expense.id}: {expense.amount} {expense.currency} ({expense.category})")
        return expense

    async def get(self, expense_id: int) -> Expense:
        expense = await self.expenses.get_by_id(expense_id)
        if expense is None:
            raise NotFoundError(f"Expense with ID {expense_id} not found")
        return expense

    async def list(
        self,
        start_date: Optional[dt.date] = None,
        end_date: Optional[dt.date] = None,
        category: Optional[str] = None,
        sort_by: ExpenseSortField = ExpenseSortField.date,
        sort_order: SortOrder = SortOrder.desc,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Expense], int]:
        """
        List expenses, optionally within an inclusive date range.

        Raises:
            BadRequestError: If ``start_date`` is after ``end_date``
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise BadRequestError("startDate must not be after endDate")
        return await self.expenses.search(
            start_date=start_date,
            end_date=end_date,
            category=category,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )

    async def update(self, expense_id: int, data: ExpenseUpdate) -> Expense:
        """
        Apply a partial update to an expense.

        ``description`` may be cleared with an explicit null; the other fields
        keep their value when null.

        Raises:
            NotFoundError: If the expense does not exist
        """
        expense = await self.get(expense_id)
        changes = data.model_dump(exclude_unset=True)

        for key, value in changes.items():
            if value is None and key != "description":
                continue
            if key == "amount":
                value = Decimal(value)
            elif key == "category":
                value = value.value
            setattr(expense, key, value)
        expense = await self.expenses.update(expense)
        logger.info(f"Updated expense {expense.id}: {sorted(changes)}")
        return expense

    async def delete(self, expense_id: int) -> None:
        """
        Delete an expense.

        Raises:
            NotFoundError: If the expense does not exist
        """
        expense = await self.get(expense_id)
        await self.expenses.delete(expense.id)
        logger.info(f"Deleted expense {expense_id}")
