"""Datetime helpers."""

from __future__ import annotations

import os
import re
from datetime import date, datetime, time, timedelta

import pendulum

DEFAULT_TZ = "Asia/Shanghai"
SALE_TIMESTAMP_FORMAT = "%m/%d/%y %H:%M"
_SALE_TIMESTAMP_RE = re.compile(r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{2} [0-9]{1,2}:[0-9]{2}")


def timezone_name() -> str:
    return os.environ.get("TIMEZONE", DEFAULT_TZ)


def now_in_tz() -> pendulum.DateTime:
    tz = pendulum.timezone(timezone_name())
    return pendulum.now(tz)


def today_in_tz() -> date:
    return now_in_tz().date()


def parse_sale_timestamp(value: str) -> datetime:
    """Parse an ``M/D/YY H:MM`` cell; raises ValueError on anything else."""
    if not _SALE_TIMESTAMP_RE.fullmatch(value):
        raise ValueError(f"not an M/D/YY H:MM timestamp: {value!r}")
    return datetime.strptime(value, SALE_TIMESTAMP_FORMAT)


def format_sale_timestamp(value: datetime) -> str:
    return f"{value.month}/{value.day}/{value:%y} {value.hour}:{value:%M}"


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def month_day_label(value: date) -> str:
    return value.strftime("%m/%d")


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time(23, 59, 59))


def trailing_days(end: date, count: int) -> list[date]:
    """The ``count`` calendar days ending at ``end``, oldest first."""
    return [end - timedelta(days=offset) for offset in reversed(range(count))]


def calendar_days(start: date, end: date) -> list[date]:
    if end < start:
        return []
    return trailing_days(end, (end - start).days + 1)
