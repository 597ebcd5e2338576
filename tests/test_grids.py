from conftest import record
from salespivot.logic.customers import CustomerBreakdown, CustomerQuantity
from salespivot.logic.daily import DailyWeeklyStat
from salespivot.logic.grids import (
    MergeSpan,
    customer_grid,
    daily_weekly_grid,
    style_customer_grid,
    style_grid,
)
from salespivot.logic.styles import compute_style_customer_pivot, compute_style_pivot


def test_daily_weekly_grid():
    grid = daily_weekly_grid([DailyWeeklyStat("A100", 20, 50, 15)])
    assert grid.header == ("Product", "Daily Sales", "7-Day Sales", "7-Day Change")
    assert grid.rows == (("A100", 20, 50, 15),)
    assert grid.merges == ()


def test_customer_grid_merges_multi_customer_blocks():
    breakdowns = [
        CustomerBreakdown("A100", [CustomerQuantity("Acme", 8), CustomerQuantity("Bolt", 4)]),
        CustomerBreakdown("B200", [CustomerQuantity("Core", 11)]),
        CustomerBreakdown("C300", [CustomerQuantity("Acme", 6), CustomerQuantity("Core", 5), CustomerQuantity("Bolt", 1)]),
    ]
    grid = customer_grid(breakdowns)
    assert grid.rows[0] == ("A100", "Acme", 8)
    assert grid.rows[2] == ("B200", "Core", 11)
    assert len(grid.rows) == 6
    assert grid.merges == (MergeSpan(0, 0, 1), MergeSpan(0, 3, 5))


def test_style_grid_has_one_column_per_observed_day():
    records = [record(1, "A100", 3), record(2, "B200", 4), record(5, "A100", 12)]
    pivot = compute_style_pivot(records)
    grid = style_grid(pivot)
    assert grid.header == ("Product", "03/01", "03/02", "03/05", "Total")
    assert grid.width == len(pivot.days) + 2
    assert grid.rows == (("A100", 3, None, 12, 15),)


def test_style_customer_grid_spans_full_range():
    records = [
        record(1, "A100", 20, customer="Acme"),
        record(3, "A100", 10, customer="Acme"),
        record(3, "A100", 25, customer="Bolt"),
    ]
    grid = style_customer_grid(compute_style_customer_pivot(records))
    assert grid.header == ("Product", "Customer", "03/01", "03/02", "03/03", "Total")
    assert grid.rows == (
        ("A100", "Acme", 20, None, 10, 30),
        ("A100", "Bolt", None, None, 25, 25),
    )
    assert grid.merges == (MergeSpan(column=0, start_row=0, end_row=1),)


def test_empty_views_produce_header_only():
    assert customer_grid([]).rows == ()
    grid = style_grid(compute_style_pivot([record(1, "A100", 1)]))
    assert grid.header == ("Product", "03/01", "Total")
    assert grid.rows == ()
