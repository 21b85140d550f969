from __future__ import annotations

import re
from datetime import date
from functools import cmp_to_key
from typing import Callable, TypeVar

T = TypeVar("T")

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today() -> date:
    return date.today()


def today_str() -> str:
    return today().strftime(DATE_FORMAT)


def parse_date(value: str | None) -> date | None:
    """Parse a strict YYYY-MM-DD calendar date, or return None."""
    if not value or not _DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def compare_dates(a: str | None, b: str | None) -> int:
    da = parse_date(a)
    db = parse_date(b)

    if da is None and db is None:
        return 0
    # unparsable dates go last
    if da is None:
        return 1
    if db is None:
        return -1

    if da < db:
        return -1
    if da > db:
        return 1
    return 0


def sort_by_date(rows: list[T], key: Callable[[T], str | None]) -> None:
    # list.sort is stable: ties keep their original position
    rows.sort(key=cmp_to_key(lambda x, y: compare_dates(key(x), key(y))))
