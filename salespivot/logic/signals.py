"""Inclusion rules for the report views."""

from __future__ import annotations

import os

DEFAULT_LATEST_DAY_THRESHOLD = 10
DEFAULT_CUSTOMER_TOTAL_THRESHOLD = 20
DEFAULT_MIN_RANGE_DAYS = 7


def latest_day_threshold() -> int:
    return int(os.environ.get("LATEST_DAY_THRESHOLD", DEFAULT_LATEST_DAY_THRESHOLD))


def customer_total_threshold() -> int:
    return int(os.environ.get("CUSTOMER_TOTAL_THRESHOLD", DEFAULT_CUSTOMER_TOTAL_THRESHOLD))


def min_range_days() -> int:
    return int(os.environ.get("MIN_RANGE_DAYS", DEFAULT_MIN_RANGE_DAYS))


def is_flat(daily_sales: int, weekly_sales: int, weekly_compare: int) -> bool:
    return daily_sales == 0 and weekly_sales == 0 and weekly_compare == 0


def meets_latest_day_threshold(quantity: int | None) -> bool:
    if quantity is None:
        return False
    return quantity >= latest_day_threshold()


def meets_customer_threshold(total_sales: int) -> bool:
    return total_sales >= customer_total_threshold()
