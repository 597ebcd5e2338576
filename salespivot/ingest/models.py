"""Ingestion data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class SaleRecord:
    date: datetime
    product_id: str
    customer: str
    quantity: int

    @property
    def day(self) -> date:
        return self.date.date()


@dataclass(frozen=True, slots=True)
class ColumnLayout:
    """Zero-based positions of the fields in a source row."""

    date: int = 0
    customer: int = 2
    product_id: int = 3
    quantity: int = 8


DEFAULT_LAYOUT = ColumnLayout()
