"""Ordering rules for the report views.

Python's sort is stable, so rows that tie keep the order in which their
product (or customer) first appeared in the input.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from salespivot.logic.customers import CustomerBreakdown
    from salespivot.logic.daily import DailyWeeklyStat
    from salespivot.logic.styles import StyleCustomerProduct, StylePivotRow


def rank_daily_weekly(stats: Sequence[DailyWeeklyStat]) -> list[DailyWeeklyStat]:
    return sorted(stats, key=lambda s: s.daily_sales, reverse=True)


def rank_breakdowns(breakdowns: Sequence[CustomerBreakdown]) -> list[CustomerBreakdown]:
    for breakdown in breakdowns:
        breakdown.customers.sort(key=lambda c: c.quantity, reverse=True)
    return sorted(breakdowns, key=lambda b: b.total, reverse=True)


def rank_style_rows(rows: Sequence[StylePivotRow], latest_day: date) -> list[StylePivotRow]:
    """Order by latest-day quantity, breaking ties by total sales.

    Rows with nothing on ``latest_day`` go last.
    """
    by_total = sorted(rows, key=lambda r: r.total_sales, reverse=True)
    return sorted(by_total, key=lambda r: _latest_day_key(r, latest_day))


def _latest_day_key(row: StylePivotRow, latest_day: date) -> tuple[int, int]:
    quantity = row.daily_sales.get(latest_day)
    if quantity is None:
        return (1, 0)
    return (0, -quantity)


def rank_style_customer_products(products: Sequence[StyleCustomerProduct]) -> list[StyleCustomerProduct]:
    for product in products:
        product.customers.sort(key=lambda c: c.total_sales, reverse=True)
    return sorted(products, key=lambda p: p.last_day_sales, reverse=True)
