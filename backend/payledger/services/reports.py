from __future__ import annotations

from datetime import datetime, time

import xlsxwriter

from payledger.schemas.ledger import Ledger
from payledger.services.rates import resolved_rate
from payledger.utils.dates import parse_date


def build_ledger_report(ledger: Ledger, out_file) -> None:
    """
    Write the ledger as an .xlsx workbook to ``out_file`` (path or buffer).

    Sheet "Days" holds one row per day plus a totals row; sheet "Rates" lists
    the rate history. Dates that do not parse are written as plain text.
    """
    wb = xlsxwriter.Workbook(out_file, {"in_memory": True})
    base_font = "Calibri"

    # ----------------------------
    # Formats
    # ----------------------------
    meta_label = wb.add_format({"bold": True, "font_name": base_font, "font_size": 11, "font_color": "#334155"})
    subtle = wb.add_format({"font_name": base_font, "font_size": 10, "font_color": "#64748b"})

    header = wb.add_format(
        {
            "bold": True,
            "font_name": base_font,
            "font_size": 11,
            "bg_color": "#F1F5F9",
            "border": 1,
            "align": "center",
            "valign": "vcenter",
        }
    )

    date_fmt = wb.add_format({"font_name": base_font, "font_size": 11, "num_format": "yyyy-mm-dd", "border": 1})
    text_cell = wb.add_format({"font_name": base_font, "font_size": 11, "border": 1, "align": "left"})
    hours_fmt = wb.add_format(
        {"font_name": base_font, "font_size": 11, "num_format": "0.00", "border": 1, "align": "right"}
    )
    money2 = wb.add_format(
        {"font_name": base_font, "font_size": 11, "num_format": "#,##0.00", "border": 1, "align": "right"}
    )

    total_label = wb.add_format(
        {"bold": True, "font_name": base_font, "font_size": 11, "bg_color": "#F8FAFC", "border": 1}
    )
    total_hours = wb.add_format(
        {
            "bold": True,
            "font_name": base_font,
            "font_size": 11,
            "bg_color": "#F8FAFC",
            "border": 1,
            "num_format": "0.00",
            "align": "right",
        }
    )
    total_money2 = wb.add_format(
        {
            "bold": True,
            "font_name": base_font,
            "font_size": 11,
            "bg_color": "#F8FAFC",
            "border": 1,
            "num_format": "#,##0.00",
            "align": "right",
        }
    )

    def write_date(ws, r: int, c: int, value: str) -> None:
        d = parse_date(value)
        if d is None:
            ws.write_string(r, c, value or "", text_cell)
        else:
            ws.write_datetime(r, c, datetime.combine(d, time.min), date_fmt)

    # ----------------------------
    # Sheet 1: Days
    # ----------------------------
    ws = wb.add_worksheet("Days")
    ws.set_column(0, 0, 12)  # Date
    ws.set_column(1, 3, 12)  # Hours, Rate, Pay
    ws.set_column(4, 4, 8)  # Paid
    ws.set_column(5, 5, 12)  # Owed

    ws.write(0, 0, "Generated", meta_label)
    ws.write(0, 1, datetime.now().strftime("%Y-%m-%d %H:%M"), subtle)

    headers = ["Date", "Hours", "Rate", "Pay", "Paid", "Owed"]
    for c, h in enumerate(headers):
        ws.write(2, c, h, header)
    ws.freeze_panes(3, 1)

    r = 3
    for d in ledger.days:
        write_date(ws, r, 0, d.date)
        ws.write_number(r, 1, d.hours, hours_fmt)
        ws.write_number(r, 2, resolved_rate(d.date, ledger.rates), money2)
        ws.write_number(r, 3, d.pay, money2)
        ws.write_string(r, 4, "yes" if d.paid else "no", text_cell)
        ws.write_number(r, 5, d.owed, money2)
        r += 1

    if r > 3:
        ws.autofilter(2, 0, r - 1, 5)

    # totals come from the recalculated ledger, not spreadsheet formulas
    ws.write(r, 0, "Total", total_label)
    ws.write_number(r, 1, ledger.days_total.hours, total_hours)
    ws.write_blank(r, 2, None, total_label)
    ws.write_number(r, 3, ledger.days_total.pay, total_money2)
    ws.write_blank(r, 4, None, total_label)
    ws.write_number(r, 5, ledger.days_total.owed, total_money2)

    # ----------------------------
    # Sheet 2: Rates
    # ----------------------------
    ws2 = wb.add_worksheet("Rates")
    ws2.set_column(0, 0, 14)
    ws2.set_column(1, 1, 12)
    ws2.write(0, 0, "Effective Date", header)
    ws2.write(0, 1, "Rate", header)
    ws2.freeze_panes(1, 0)

    for i, rt in enumerate(ledger.rates, start=1):
        write_date(ws2, i, 0, rt.effective_date)
        ws2.write_number(i, 1, rt.rate, money2)

    wb.close()
