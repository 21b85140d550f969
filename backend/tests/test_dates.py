from datetime import date

import pytest

from payledger.utils.dates import compare_dates, parse_date, sort_by_date


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-03-01", date(2024, 3, 1)),
        ("2024-02-29", date(2024, 2, 29)),
        ("2023-02-29", None),
        ("2024-3-1", None),
        ("20240301", None),
        ("2024-03-01T00:00", None),
        (" 2024-03-01", None),
        ("bad", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_date_is_strict(value, expected):
    assert parse_date(value) == expected


def test_compare_dates_orders_valid_dates_ascending():
    assert compare_dates("2024-01-01", "2024-06-01") == -1
    assert compare_dates("2024-06-01", "2024-01-01") == 1
    assert compare_dates("2024-06-01", "2024-06-01") == 0


def test_compare_dates_pushes_unparsable_last():
    assert compare_dates("bad", "2024-01-01") == 1
    assert compare_dates("2024-01-01", "bad") == -1
    assert compare_dates("bad", "") == 0


def test_sort_by_date_is_stable_for_ties():
    rows = [
        ("x", "bad"),
        ("a", "2024-05-01"),
        ("y", ""),
        ("b", "2024-01-01"),
        ("c", "2024-05-01"),
    ]
    sort_by_date(rows, lambda r: r[1])
    assert [r[0] for r in rows] == ["b", "a", "c", "x", "y"]
