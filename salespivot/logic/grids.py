"""Rectangular grids for each report view."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence, Union

from salespivot.logic.customers import CustomerBreakdown
from salespivot.logic.daily import DailyWeeklyStat
from salespivot.logic.styles import StyleCustomerPivot, StylePivot
from salespivot.utils.dates import month_day_label

Cell = Union[str, int, None]

PRODUCT = "Product"
CUSTOMER = "Customer"
TOTAL = "Total"
DAILY_WEEKLY_HEADER = (PRODUCT, "Daily Sales", "7-Day Sales", "7-Day Change")
CUSTOMER_HEADER = (PRODUCT, CUSTOMER, "Quantity")


@dataclass(frozen=True, slots=True)
class MergeSpan:
    """Rows ``start_row``..``end_row`` of ``column`` shown as one cell (0-based, header excluded)."""

    column: int
    start_row: int
    end_row: int


@dataclass(frozen=True, slots=True)
class PivotGrid:
    header: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]
    merges: tuple[MergeSpan, ...] = ()

    @property
    def width(self) -> int:
        return len(self.header)


def daily_weekly_grid(stats: Sequence[DailyWeeklyStat]) -> PivotGrid:
    rows = tuple((s.product_id, s.daily_sales, s.weekly_sales, s.weekly_compare) for s in stats)
    return PivotGrid(header=DAILY_WEEKLY_HEADER, rows=rows)


def customer_grid(breakdowns: Sequence[CustomerBreakdown]) -> PivotGrid:
    rows: list[tuple[Cell, ...]] = []
    merges: list[MergeSpan] = []
    for breakdown in breakdowns:
        start = len(rows)
        for entry in breakdown.customers:
            rows.append((breakdown.product_id, entry.customer, entry.quantity))
        _merge_block(merges, start, len(rows) - 1)
    return PivotGrid(header=CUSTOMER_HEADER, rows=tuple(rows), merges=tuple(merges))


def style_grid(pivot: StylePivot) -> PivotGrid:
    header = (PRODUCT, *_day_labels(pivot.days), TOTAL)
    rows = tuple(
        (row.product_id, *_day_cells(row.daily_sales, pivot.days), row.total_sales)
        for row in pivot.rows
    )
    return PivotGrid(header=header, rows=rows)


def style_customer_grid(pivot: StyleCustomerPivot) -> PivotGrid:
    header = (PRODUCT, CUSTOMER, *_day_labels(pivot.days), TOTAL)
    rows: list[tuple[Cell, ...]] = []
    merges: list[MergeSpan] = []
    for product in pivot.products:
        start = len(rows)
        for row in product.customers:
            rows.append(
                (product.product_id, row.customer, *_day_cells(row.daily_sales, pivot.days), row.total_sales)
            )
        _merge_block(merges, start, len(rows) - 1)
    return PivotGrid(header=header, rows=tuple(rows), merges=tuple(merges))


def _day_labels(days: Sequence[date]) -> list[str]:
    return [month_day_label(day) for day in days]


def _day_cells(daily_sales: dict[date, int], days: Sequence[date]) -> list[Cell]:
    return [daily_sales.get(day) for day in days]


def _merge_block(merges: list[MergeSpan], start: int, end: int) -> None:
    if end > start:
        merges.append(MergeSpan(column=0, start_row=start, end_row=end))
