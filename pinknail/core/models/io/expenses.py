"""
Expense I/O models for API requests and responses.

Amounts travel as strings with at most two decimal places so that no client
ever rounds money through a float.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer

from pinknail.core.models.domain import ExpenseCategory

from .common import CamelModel

AMOUNT_PATTERN = r"^\d+(\.\d{1,2})?$"
CURRENCY_PATTERN = r"^[A-Z]{3}$"


class ExpenseCreate(CamelModel):
    """Schema for recording an expense."""

    date: dt.date
    category: ExpenseCategory
    amount: str = Field(pattern=AMOUNT_PATTERN, max_length=13, description='Amount as a string, e.g. "125.50"')
    description: Optional[str] = Field(default=None, max_length=500)
    currency: str = Field(default="USD", pattern=CURRENCY_PATTERN, description="ISO 4217 currency code")


class ExpenseUpdate(CamelModel):
    """Schema for partially updating an expense."""

    date: Optional[dt.date] = None
    category: Optional[ExpenseCategory] = None
    amount: Optional[str] = Field(default=None, pattern=AMOUNT_PATTERN, max_length=13)
    description: Optional[str] = Field(default=None, max_length=500)
    currency: Optional[str] = Field(default=None, pattern=CURRENCY_PATTERN)


class ExpenseRead(CamelModel):
    """Schema for reading an expense."""

    id: int
    date: dt.date
    category: ExpenseCategory
    amount: Decimal
    description: Optional[str] = None
    currency: str
    created_at: dt.datetime
    updated_at: dt.datetime

    @field_serializer("amount")
    def format_amount(self, value: Decimal) -> str:
        return f"{value:.2f}"
