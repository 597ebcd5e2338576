"""Latest-day customer split per product."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from salespivot.errors import EmptyInputError
from salespivot.ingest.models import SaleRecord
from salespivot.logic.frames import records_frame
from salespivot.logic.ranking import rank_breakdowns
from salespivot.logic.signals import meets_latest_day_threshold
from salespivot.logic.windows import latest_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CustomerQuantity:
    customer: str
    quantity: int


@dataclass(slots=True)
class CustomerBreakdown:
    product_id: str
    customers: list[CustomerQuantity] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(entry.quantity for entry in self.customers)


def compute_customer_breakdowns(records: Sequence[SaleRecord]) -> list[CustomerBreakdown]:
    if not records:
        raise EmptyInputError()
    latest_day = latest_date(records).date()
    frame = records_frame(records)
    same_day = frame[frame["day"] == latest_day]
    sums = same_day.groupby(["product_id", "customer"], sort=False)["quantity"].sum()

    breakdowns: list[CustomerBreakdown] = []
    for product_id, per_customer in sums.groupby(level="product_id", sort=False):
        breakdown = CustomerBreakdown(
            product_id=product_id,
            customers=[
                CustomerQuantity(customer=customer, quantity=int(quantity))
                for (_, customer), quantity in per_customer.items()
            ],
        )
        if meets_latest_day_threshold(breakdown.total):
            breakdowns.append(breakdown)
    logger.info("%s products sold to customers on %s", len(breakdowns), latest_day)
    return rank_breakdowns(breakdowns)
