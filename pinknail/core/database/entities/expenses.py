"""
Expense entity models.

This module contains the database entity for the salon's bookkeeping: money
spent on supplies, materials, utilities and the like. Expenses are subtracted
from booking revenue in the profit report.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from pinknail.core.models.domain import ExpenseCategory

from ..base import Base, utc_now


class ExpenseBase(Base):
    """Base fields for an expense."""

    amount: Decimal = Field(max_digits=12, decimal_places=2, description="Amount with two decimal places")
    category: str = Field(default=ExpenseCategory.other.value, max_length=16, index=True)
    date: dt.date = Field(index=True, description="Day the money was spent")
    description: Optional[str] = Field(default=None, max_length=500)
    currency: str = Field(default="USD", max_length=3, description="ISO 4217 currency code")


class Expense(ExpenseBase, table=True):
    """Persistent expense record.

    Table: expenses
    """

    __tablename__ = "expenses"

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: dt.datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Expense(id={self.id}, date={self.date}, category={self.category}, amount={self.amount})"
