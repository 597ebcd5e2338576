"""Per-day product pivots across the full date range."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from salespivot.errors import EmptyInputError
from salespivot.ingest.models import SaleRecord
from salespivot.logic.frames import daily_sums, records_frame
from salespivot.logic.ranking import rank_style_customer_products, rank_style_rows
from salespivot.logic.signals import meets_customer_threshold, meets_latest_day_threshold
from salespivot.logic.windows import earliest_date, latest_date
from salespivot.utils.dates import calendar_days

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StylePivotRow:
    product_id: str
    daily_sales: dict[date, int]
    total_sales: int


@dataclass(slots=True)
class StylePivot:
    rows: list[StylePivotRow]
    days: list[date]

    @property
    def latest_day(self) -> date | None:
        return self.days[-1] if self.days else None


@dataclass(slots=True)
class StyleCustomerPivotRow:
    product_id: str
    customer: str
    daily_sales: dict[date, int]
    total_sales: int


@dataclass(slots=True)
class StyleCustomerProduct:
    product_id: str
    last_day_sales: int
    customers: list[StyleCustomerPivotRow] = field(default_factory=list)


@dataclass(slots=True)
class StyleCustomerPivot:
    products: list[StyleCustomerProduct]
    days: list[date]


def compute_style_pivot(records: Sequence[SaleRecord]) -> StylePivot:
    """Quantity per product and observed day, for products busy on the latest day.

    ``days`` lists only the days that appear in the records.
    """
    if not records:
        raise EmptyInputError()
    frame = records_frame(records)
    days = sorted(frame["day"].unique())
    latest_day = days[-1]

    rows: list[StylePivotRow] = []
    for product_id, per_day in daily_sums(frame, ["product_id"]).groupby(level="product_id", sort=False):
        daily_sales = {day: int(quantity) for (_, day), quantity in per_day.items()}
        if not meets_latest_day_threshold(daily_sales.get(latest_day)):
            continue
        rows.append(
            StylePivotRow(
                product_id=product_id,
                daily_sales=daily_sales,
                total_sales=sum(daily_sales.values()),
            )
        )
    logger.info("%s products over %s observed days", len(rows), len(days))
    return StylePivot(rows=rank_style_rows(rows, latest_day), days=days)


def compute_style_customer_pivot(records: Sequence[SaleRecord]) -> StyleCustomerPivot:
    """Quantity per product, customer and day over every day from first to last record."""
    if not records:
        raise EmptyInputError()
    start = earliest_date(records).date()
    end = latest_date(records).date()
    frame = records_frame(records)
    sums = daily_sums(frame, ["product_id", "customer"])

    products: list[StyleCustomerProduct] = []
    for product_id, per_product in sums.groupby(level="product_id", sort=False):
        last_day_sales = 0
        customers: list[StyleCustomerPivotRow] = []
        for customer, per_day in per_product.groupby(level="customer", sort=False):
            daily_sales = {day: int(quantity) for (_, _, day), quantity in per_day.items()}
            last_day_sales += daily_sales.get(end, 0)
            total_sales = sum(daily_sales.values())
            if meets_customer_threshold(total_sales):
                customers.append(
                    StyleCustomerPivotRow(
                        product_id=product_id,
                        customer=customer,
                        daily_sales=daily_sales,
                        total_sales=total_sales,
                    )
                )
        if meets_latest_day_threshold(last_day_sales):
            products.append(
                StyleCustomerProduct(product_id=product_id, last_day_sales=last_day_sales, customers=customers)
            )
    days = calendar_days(start, end)
    logger.info("%s products with repeat customers over %s days", len(products), len(days))
    return StyleCustomerPivot(products=rank_style_customer_products(products), days=days)
