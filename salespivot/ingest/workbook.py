"""Source workbook reader."""

from __future__ import annotations

import logging
import zipfile
from datetime import date, datetime
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from salespivot.errors import WorkbookReadError
from salespivot.utils.dates import format_sale_timestamp

logger = logging.getLogger(__name__)


class WorkbookReader:
    """Reads the first sheet of an .xlsx file as rows of text."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_rows(self) -> list[list[str]]:
        try:
            workbook = load_workbook(self.path, read_only=True, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
            raise WorkbookReadError(f"error opening file {self.path}: {exc}") from exc
        try:
            if not workbook.sheetnames:
                raise WorkbookReadError(f"no sheets found in {self.path}")
            sheet = workbook[workbook.sheetnames[0]]
            rows = [_row_text(values) for values in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()
        logger.info("Read %s rows from %s", len(rows), self.path.name)
        return rows


def read_rows(path: str | Path) -> list[list[str]]:
    return WorkbookReader(path).read_rows()


def _row_text(values) -> list[str]:
    cells = [_cell_text(value) for value in values]
    while cells and cells[-1] == "":
        cells.pop()
    return cells


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return format_sale_timestamp(value)
    if isinstance(value, date):
        return format_sale_timestamp(datetime.combine(value, datetime.min.time()))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
