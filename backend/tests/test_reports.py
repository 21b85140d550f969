from io import BytesIO

import pytest

from payledger.schemas.ledger import DayRow, Ledger, RateRow
from payledger.services.ledger import recalculate
from payledger.services.reports import build_ledger_report


def test_report_has_days_totals_and_rates():
    pytest.importorskip("openpyxl")
    from openpyxl import load_workbook

    ledger = Ledger(
        days=[
            DayRow(date="2024-03-01", hours=5.0),
            DayRow(date="2024-07-01", hours=5.0, paid=True),
            DayRow(date="bad", hours=3.0),
        ],
        rates=[RateRow(effective_date="2024-01-01", rate=10.0), RateRow(effective_date="2024-06-01", rate=20.0)],
    )
    recalculate(ledger)

    out = BytesIO()
    build_ledger_report(ledger, out)
    out.seek(0)

    wb = load_workbook(out)
    assert wb.sheetnames == ["Days", "Rates"]

    ws = wb["Days"]
    assert [c.value for c in ws[3]] == ["Date", "Hours", "Rate", "Pay", "Paid", "Owed"]
    assert ws["C4"].value == 10
    assert ws["D5"].value == 100
    assert ws["E5"].value == "yes"
    assert ws["A6"].value == "bad"
    assert ws["A7"].value == "Total"
    assert ws["B7"].value == 13
    assert ws["D7"].value == 150
    assert ws["F7"].value == 50

    rates = wb["Rates"]
    assert rates["B2"].value == 10
    assert rates["B3"].value == 20
