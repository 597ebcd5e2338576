"""Daily and trailing-week sales per product."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from salespivot.errors import EmptyInputError
from salespivot.ingest.models import SaleRecord
from salespivot.logic.frames import first_seen, records_frame, window_totals
from salespivot.logic.ranking import rank_daily_weekly
from salespivot.logic.signals import is_flat
from salespivot.logic.windows import earliest_date, latest_date, validate_range
from salespivot.utils.dates import format_date, trailing_days

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DailyWeeklyStat:
    product_id: str
    daily_sales: int
    weekly_sales: int
    weekly_compare: int


def compute_daily_weekly(records: Sequence[SaleRecord]) -> list[DailyWeeklyStat]:
    """Sales on the latest day and over the seven days ending on it.

    ``weekly_compare`` subtracts the seven days ending the day before, so both
    windows share six days.
    """
    if not records:
        raise EmptyInputError()
    latest = latest_date(records)
    validate_range(earliest_date(records), latest)
    logger.info("Latest date: %s", format_date(latest))

    window = trailing_days(latest.date(), 8)
    frame = records_frame(records)
    products = first_seen(frame, "product_id")
    totals = pd.DataFrame(
        {
            "daily_sales": window_totals(frame, window[-1:], products),
            "weekly_sales": window_totals(frame, window[1:], products),
            "previous_sales": window_totals(frame, window[:-1], products),
        }
    )

    stats: list[DailyWeeklyStat] = []
    for row in totals.itertuples():
        weekly_compare = int(row.weekly_sales - row.previous_sales)
        if is_flat(row.daily_sales, row.weekly_sales, weekly_compare):
            continue
        stats.append(
            DailyWeeklyStat(
                product_id=row.Index,
                daily_sales=int(row.daily_sales),
                weekly_sales=int(row.weekly_sales),
                weekly_compare=weekly_compare,
            )
        )
    return rank_daily_weekly(stats)
