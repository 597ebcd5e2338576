"""Ingestion helpers."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from salespivot.errors import RecordParseError
from salespivot.ingest.models import DEFAULT_LAYOUT, ColumnLayout, SaleRecord
from salespivot.utils.dates import parse_sale_timestamp

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = 12
# The product pivot has always accepted shorter rows than the other views.
STYLE_PIVOT_REQUIRED_COLUMNS = 9

_QUANTITY_RE = re.compile(r"[+-]?[0-9]+")


def parse_quantity(value: str) -> int:
    if not _QUANTITY_RE.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def parse_records(
    rows: Iterable[Sequence[str]],
    *,
    min_columns: int = REQUIRED_COLUMNS,
    layout: ColumnLayout = DEFAULT_LAYOUT,
) -> list[SaleRecord]:
    """Turn raw sheet rows into sale records.

    The first row is the header. Rows shorter than ``min_columns`` are skipped;
    a bad date or quantity in any other row aborts with the 1-based row number.
    """
    records: list[SaleRecord] = []
    skipped = 0
    for index, row in enumerate(rows):
        if index == 0:
            continue
        if len(row) < min_columns:
            skipped += 1
            continue
        row_number = index + 1
        try:
            sold_at = parse_sale_timestamp(row[layout.date])
        except ValueError as exc:
            raise RecordParseError(row_number, "date", row[layout.date]) from exc
        try:
            quantity = parse_quantity(row[layout.quantity])
        except ValueError as exc:
            raise RecordParseError(row_number, "quantity", row[layout.quantity]) from exc
        records.append(
            SaleRecord(
                date=sold_at,
                product_id=row[layout.product_id],
                customer=row[layout.customer],
                quantity=quantity,
            )
        )
    if skipped:
        logger.debug("Skipped %s rows shorter than %s columns", skipped, min_columns)
    return records
