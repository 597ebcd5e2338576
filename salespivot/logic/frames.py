"""DataFrame helpers shared by the aggregations."""

from __future__ import annotations

from datetime import date
from typing import Sequence

import pandas as pd

from salespivot.ingest.models import SaleRecord

COLUMNS = ["date", "day", "product_id", "customer", "quantity"]


def records_frame(records: Sequence[SaleRecord]) -> pd.DataFrame:
    """One row per record; ``day`` holds the calendar date with time dropped."""
    return pd.DataFrame(
        [(r.date, r.day, r.product_id, r.customer, r.quantity) for r in records],
        columns=COLUMNS,
    )


def first_seen(frame: pd.DataFrame, column: str) -> pd.Index:
    return pd.Index(frame[column].unique(), name=column)


def window_totals(frame: pd.DataFrame, days: Sequence[date], order: pd.Index) -> pd.Series:
    """Quantity per product over the contiguous ``days``, zero-filled and in ``order``."""
    in_window = frame[(frame["day"] >= days[0]) & (frame["day"] <= days[-1])]
    totals = in_window.groupby("product_id")["quantity"].sum()
    return totals.reindex(order, fill_value=0)


def daily_sums(frame: pd.DataFrame, keys: list[str]) -> pd.Series:
    """Quantity summed per ``keys`` and day, groups in order of first appearance."""
    return frame.groupby([*keys, "day"], sort=False)["quantity"].sum()
