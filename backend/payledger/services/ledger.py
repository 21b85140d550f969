from __future__ import annotations

from payledger.schemas.ledger import DaysTotal, Ledger
from payledger.services.rates import resolved_rate
from payledger.utils.dates import sort_by_date


def recalculate(ledger: Ledger) -> None:
    """
    Re-sort both lists and rewrite every derived field in place.

    Malformed dates never abort the pass: they sort after all valid dates and
    resolve to a zero rate. Totals are summed from scratch and swapped in as
    one object.
    """
    sort_by_date(ledger.rates, lambda r: r.effective_date)
    sort_by_date(ledger.days, lambda d: d.date)

    sum_hours = 0.0
    sum_pay = 0.0
    sum_owed = 0.0

    for d in ledger.days:
        pay = resolved_rate(d.date, ledger.rates) * d.hours
        d.pay = pay
        sum_hours += d.hours
        sum_pay += pay
        if d.paid:
            d.owed = 0.0
        else:
            d.owed = pay
            sum_owed += pay

    ledger.days_total = DaysTotal(hours=sum_hours, pay=sum_pay, owed=sum_owed)
