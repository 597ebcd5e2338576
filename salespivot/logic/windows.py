"""Date window resolution over sale records."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Sequence

from salespivot.errors import InsufficientDataError
from salespivot.ingest.models import SaleRecord
from salespivot.logic.signals import min_range_days
from salespivot.utils.dates import end_of_day, format_date

logger = logging.getLogger(__name__)


def latest_date(records: Sequence[SaleRecord]) -> datetime | None:
    if not records:
        return None
    return max(record.date for record in records)


def earliest_date(records: Sequence[SaleRecord]) -> datetime | None:
    if not records:
        return None
    return min(record.date for record in records)


def covered_days(earliest: datetime, latest: datetime) -> int:
    """Whole days from ``earliest`` up to the end of ``latest``'s day, rounded up."""
    span = end_of_day(latest) - earliest
    return math.ceil(span.total_seconds() / 86400)


def validate_range(earliest: datetime, latest: datetime, minimum: int | None = None) -> int:
    if minimum is None:
        minimum = min_range_days()
    days = covered_days(earliest, latest)
    if days < minimum:
        raise InsufficientDataError(earliest, latest, days, minimum)
    logger.info("Data range %s to %s (%s days)", format_date(earliest), format_date(latest), days)
    return days
