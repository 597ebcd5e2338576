"""Report job orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from salespivot.errors import EmptyInputError
from salespivot.ingest import STYLE_PIVOT_REQUIRED_COLUMNS, parse_records
from salespivot.ingest.workbook import read_rows
from salespivot.logic.customers import compute_customer_breakdowns
from salespivot.logic.daily import compute_daily_weekly
from salespivot.logic.export_xlsx import WorkbookWriter
from salespivot.logic.grids import customer_grid, daily_weekly_grid, style_customer_grid, style_grid
from salespivot.logic.styles import compute_style_customer_pivot, compute_style_pivot
from salespivot.utils.dates import today_in_tz
from salespivot.utils.progress import ProgressSink, notify

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_analyzed"


@dataclass(slots=True)
class ReportResult:
    output_path: Path
    run_date: date
    sheet_names: list[str]


def sheet_names(run_date: date) -> tuple[str, str, str, str]:
    day = run_date.strftime("%m.%d")
    month = run_date.strftime("%m")
    return (
        f"{day} Sales",
        f"{day} Customers",
        f"{month} Product+Customer",
        f"{month} Product",
    )


def default_output_path(input_path: str | Path) -> Path:
    source = Path(input_path)
    return source.with_name(f"{source.stem}{OUTPUT_SUFFIX}{source.suffix}")


def build_report(
    input_path: str | Path,
    output_path: str | Path | None = None,
    *,
    progress: ProgressSink | None = None,
    run_date: date | None = None,
) -> ReportResult:
    """Run all four views over ``input_path`` and save one workbook.

    The workbook is written only after every view succeeds; any error leaves
    no output behind.
    """
    target = Path(output_path) if output_path else default_output_path(input_path)
    run_date = run_date or today_in_tz()
    daily_name, customer_name, style_customer_name, style_name = sheet_names(run_date)
    logger.info("Analyzing %s", input_path)

    notify(progress, 10, "Daily sales: reading file")
    rows = read_rows(input_path)
    records = parse_records(rows)
    style_records = parse_records(rows, min_columns=STYLE_PIVOT_REQUIRED_COLUMNS)
    if not records or not style_records:
        raise EmptyInputError(f"no usable records in {Path(input_path).name}")

    writer = WorkbookWriter()

    notify(progress, 20, "Daily sales: analyzing data")
    writer.add_sheet(daily_name, daily_weekly_grid(compute_daily_weekly(records)))
    notify(progress, 25, "Daily sales: sheet written")

    notify(progress, 35, "Customer sales: analyzing data")
    breakdowns = compute_customer_breakdowns(records)
    notify(progress, 40, "Customer sales: writing data")
    writer.add_sheet(customer_name, customer_grid(breakdowns))

    notify(progress, 70, "Product + customer sales: analyzing data")
    writer.add_sheet(style_customer_name, style_customer_grid(compute_style_customer_pivot(records)))

    notify(progress, 90, "Product sales: analyzing data")
    writer.add_sheet(style_name, style_grid(compute_style_pivot(style_records)))

    saved = writer.save(target)
    notify(progress, 100, "Report saved")
    logger.info("Analysis complete: %s", saved)
    return ReportResult(output_path=saved, run_date=run_date, sheet_names=writer.sheet_names)
