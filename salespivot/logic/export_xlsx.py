"""Excel export helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError

from salespivot.errors import WorkbookWriteError
from salespivot.logic.grids import PivotGrid

logger = logging.getLogger(__name__)

HEADER_ROW = 1
FIRST_DATA_ROW = 2


class WorkbookWriter:
    """Builds the report workbook in memory; nothing touches disk until ``save``."""

    def __init__(self) -> None:
        self.workbook = Workbook()
        self.workbook.remove(self.workbook.active)

    @property
    def sheet_names(self) -> list[str]:
        return list(self.workbook.sheetnames)

    def add_sheet(self, title: str, grid: PivotGrid) -> None:
        try:
            sheet = self.workbook.create_sheet(title=title)
        except ValueError as exc:
            raise WorkbookWriteError(f"failed to create sheet {title!r}: {exc}") from exc
        if sheet.title != title:
            self.workbook.remove(sheet)
            raise WorkbookWriteError(f"failed to create sheet {title!r}: name already in use")

        try:
            for col, label in enumerate(grid.header, start=1):
                sheet.cell(row=HEADER_ROW, column=col, value=label)
            for offset, values in enumerate(grid.rows):
                for col, value in enumerate(values, start=1):
                    if value is not None:
                        sheet.cell(row=FIRST_DATA_ROW + offset, column=col, value=value)
        except (IllegalCharacterError, ValueError) as exc:
            self.workbook.remove(sheet)
            raise WorkbookWriteError(f"failed to write sheet {title!r}: {exc}") from exc
        for span in grid.merges:
            sheet.merge_cells(
                start_row=FIRST_DATA_ROW + span.start_row,
                start_column=span.column + 1,
                end_row=FIRST_DATA_ROW + span.end_row,
                end_column=span.column + 1,
            )
        self.workbook.active = self.workbook.index(sheet)
        logger.info("Sheet %s: %s rows, %s merged blocks", title, len(grid.rows), len(grid.merges))

    def save(self, path: str | Path) -> Path:
        """Write the workbook next to ``path`` and rename it into place."""
        target = Path(path)
        staging = target.with_name(f".{target.name}.tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self.workbook.save(staging)
            os.replace(staging, target)
        except OSError as exc:
            if staging.exists():
                staging.unlink()
            raise WorkbookWriteError(f"failed to save {target}: {exc}") from exc
        logger.info("Workbook saved to %s", target)
        return target
