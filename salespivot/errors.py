"""Report pipeline errors."""

from __future__ import annotations

from datetime import datetime

from salespivot.utils.dates import format_date

INSUFFICIENT_DATA_PREFIX = "Insufficient data:"


class ReportError(RuntimeError):
    pass


class RecordParseError(ReportError):
    def __init__(self, row: int, field: str, value: str) -> None:
        self.row = row
        self.field = field
        self.value = value
        super().__init__(f"error parsing {field} in row {row}: {value!r}")


class EmptyInputError(ReportError):
    def __init__(self, message: str = "no records provided") -> None:
        super().__init__(message)


class InsufficientDataError(ReportError):
    """Raised when the records cover fewer days than the weekly view needs."""

    def __init__(self, earliest: datetime, latest: datetime, days: int, minimum: int = 7) -> None:
        self.earliest = earliest
        self.latest = latest
        self.days = days
        self.minimum = minimum
        super().__init__(
            f"{INSUFFICIENT_DATA_PREFIX} at least {minimum} days of data are required, "
            f"data covers {format_date(earliest)} to {format_date(latest)} ({days} days)"
        )


class WorkbookReadError(ReportError):
    pass


class WorkbookWriteError(ReportError):
    pass


def is_insufficient_data(exc: BaseException) -> bool:
    return str(exc).startswith(INSUFFICIENT_DATA_PREFIX)
