"""
Profit analytics.

Revenue is the sum of service prices over completed bookings; expenses are
the recorded expense amounts. Both are bucketed by day, week or month for the
dashboard chart.
"""

from __future__ import annotations

import datetime as dt
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinknail.core.database.repositories import BookingRepository, ExpenseRepository
from pinknail.core.exceptions import BadRequestError
from pinknail.core.logging_config import get_logger
from pinknail.core.models.domain import ReportGrouping
from pinknail.core.models.io import ChartPoint, ProfitReport

logger = get_logger(__name__)


def _money(value) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01")))


def _bucket_totals(rows: Iterable[Tuple[dt.date, object]], group_by: ReportGrouping) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(Decimal)
    for date, amount in rows:
        totals[group_by.bucket(date)] += Decimal(str(amount))
    return totals


class AnalyticsService:
    """Service computing the profit report for the admin dashboard."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.bookings = BookingRepository(session)
        self.expenses = ExpenseRepository(session)

    async def profit_report(
        self, start_date: dt.date, end_date: dt.date, group_by: ReportGrouping = ReportGrouping.day
    ) -> ProfitReport:
        """
        Compute revenue, expenses and profit for an inclusive date range.

        Chart buckets only appear when they have revenue or expenses, sorted
        by label.

        Raises:
            BadRequestError: If ``start_date`` is after ``end_date``
        """
        if start_date > end_date:
            raise BadRequestError("startDate must not be after endDate")

        revenue_rows = await self.bookings.completed_revenue_between(start_date, end_date)
        expense_rows = await self.expenses.amounts_between(start_date, end_date)

        revenue_by_bucket = _bucket_totals(revenue_rows, group_by)
        expenses_by_bucket = _bucket_totals(expense_rows, group_by)
        chart_data = []
        for label in sorted(set(revenue_by_bucket) | set(expenses_by_bucket)):
            revenue = revenue_by_bucket.get(label, Decimal(0))
            expenses = expenses_by_bucket.get(label, Decimal(0))
            chart_data.append(
                ChartPoint(
                    date=label,
                    revenue=_money(revenue),
                    expenses=_money(expenses),
                    profit=_money(revenue - expenses),
                )
            )

        revenue = sum(revenue_by_bucket.values(), Decimal(0))
        expenses = sum(expenses_by_bucket.values(), Decimal(0))
        logger.debug(
            f"Profit report {start_date}..{end_date} by {group_by.value}: "
            f"{len(revenue_rows)} booking(s), {len(expense_rows)} expense(s)"
        )
        return ProfitReport(
            revenue=_money(revenue),
            expenses=_money(expenses),
            profit=_money(revenue - expenses),
            bookings_count=len(revenue_rows),
            expenses_count=len(expense_rows),
            chart_data=chart_data,
        )
