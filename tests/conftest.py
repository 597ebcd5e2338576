from datetime import datetime, timedelta

import pytest
from openpyxl import Workbook

from salespivot.ingest.models import SaleRecord

HEADER = [
    "Date", "Order", "Customer", "Product", "Color", "Size",
    "Warehouse", "Price", "Quantity", "Amount", "Clerk", "Note",
]

BASE_DAY = datetime(2024, 3, 1, 9, 30)


def sale_row(when: datetime | str, customer: str, product: str, quantity: int | str, width: int = 12) -> list[str]:
    stamp = when if isinstance(when, str) else f"{when.month}/{when.day}/{when:%y} {when.hour}:{when:%M}"
    row = [stamp, "SO-1", customer, product, "black", "M", "WH1", "99", str(quantity), "0", "amy", "-"]
    return row[:width]


def record(day: int, product: str, quantity: int, customer: str = "Acme", hour: int = 10) -> SaleRecord:
    """A sale on day ``day`` (1-based) of March 2024."""
    return SaleRecord(
        date=datetime(2024, 3, day, hour, 0),
        product_id=product,
        customer=customer,
        quantity=quantity,
    )


@pytest.fixture()
def a100_records():
    return [record(day, "A100", qty) for day, qty in enumerate([5, 5, 5, 5, 5, 5, 5, 20], start=1)]


@pytest.fixture()
def sales_rows():
    """Ten days of sales for three products and three customers."""
    rows = [HEADER]
    for offset in range(10):
        when = BASE_DAY + timedelta(days=offset)
        rows.append(sale_row(when, "Acme", "A100", 6))
        rows.append(sale_row(when, "Bolt", "A100", 5))
        rows.append(sale_row(when, "Acme", "B200", 1))
        if offset == 9:
            rows.append(sale_row(when, "Core", "C300", 12))
    return rows


@pytest.fixture()
def write_workbook(tmp_path):
    def _write(rows, name="sales.xlsx"):
        wb = Workbook()
        ws = wb.active
        ws.title = "Orders"
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _write
