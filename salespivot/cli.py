"""Command-line entry point for the sales report."""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from salespivot.errors import ReportError, is_insufficient_data
from salespivot.jobs.report import build_report
from salespivot.utils.progress import LoggingProgressSink

logger = logging.getLogger(__name__)

EXIT_REPORT_ERROR = 2
EXIT_INSUFFICIENT_DATA = 3


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="salespivot", description="Build the multi-sheet sales analysis workbook")
    ap.add_argument("input", type=Path, help="Source .xlsx with one transaction per row")
    ap.add_argument("--output", type=Path, default=None, help="Where to write the report (default: beside the input)")
    ap.add_argument("--save-to", type=Path, default=None, help="Also copy the finished report here")
    ap.add_argument("--quiet", action="store_true", help="Do not log progress checkpoints")
    return ap


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    progress = None if args.quiet else LoggingProgressSink()

    try:
        result = build_report(args.input, args.output, progress=progress)
    except ReportError as exc:
        if is_insufficient_data(exc):
            print(str(exc), file=sys.stderr)
            return EXIT_INSUFFICIENT_DATA
        print(f"Analysis failed: {exc}", file=sys.stderr)
        return EXIT_REPORT_ERROR

    if args.save_to:
        try:
            shutil.copyfile(result.output_path, args.save_to)
        except OSError as exc:
            print(f"Saving file failed: {exc}", file=sys.stderr)
            return EXIT_REPORT_ERROR
        logger.info("File saved to %s", args.save_to)

    print(result.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
