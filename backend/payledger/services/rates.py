from __future__ import annotations

from datetime import date
from typing import Iterable

from payledger.schemas.ledger import RateRow
from payledger.utils.dates import parse_date


def resolved_rate(day_date: str | None, rates: Iterable[RateRow]) -> float:
    """
    Hourly rate in effect on ``day_date``.

    The latest rate whose effective date is on or before the day wins; rates
    dated after the day never apply. When several rates share that latest
    date, the last one in ``rates`` wins. Unparsable day or rate dates, or no
    qualifying rate at all, resolve to 0.
    """
    day = parse_date(day_date)
    if day is None:
        return 0.0

    best: date | None = None
    rate = 0.0
    for r in rates:
        eff = parse_date(r.effective_date)
        if eff is None or eff > day:
            continue
        if best is None or eff >= best:
            best = eff
            rate = float(r.rate)
    return rate
