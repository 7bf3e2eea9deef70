"""
Analytics I/O models.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .common import CamelModel


class ChartPoint(CamelModel):
    """Revenue, expenses and profit of one report bucket."""

    date: str = Field(description="Bucket label: YYYY-MM-DD, YYYY-Www or YYYY-MM")
    revenue: float
    expenses: float
    profit: float


class ProfitReport(CamelModel):
    """Schema for the profit report of a date range."""

    revenue: float = Field(description="Sum of service prices of completed bookings")
    expenses: float = Field(description="Sum of expense amounts")
    profit: float = Field(description="revenue - expenses")
    bookings_count: int = Field(ge=0)
    expenses_count: int = Field(ge=0)
    chart_data: List[ChartPoint]
