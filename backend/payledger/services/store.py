from __future__ import annotations

import logging
import os
import threading
from typing import Iterable

from payledger.schemas.day import DayEdit
from payledger.schemas.ledger import DayRow, EditBatch, Ledger, LedgerOut, RateRow
from payledger.schemas.rate import RateEdit
from payledger.services.ledger import recalculate
from payledger.services.snapshot import SnapshotError, load_snapshot, save_snapshot
from payledger.utils.dates import today_str

logger = logging.getLogger(__name__)


class UnknownRowError(LookupError):
    def __init__(self, kind: str, row_id: str):
        super().__init__(f"{kind} {row_id} not found")
        self.kind = kind
        self.row_id = row_id


class LedgerStore:
    """
    Owner of the in-memory ledger.

    Each mutation runs edit, recalculation and save as one critical section.
    A failed save is logged and remembered in ``last_save_error``; the
    in-memory ledger keeps the edit and the next good save catches the file up.
    """

    def __init__(self, path: str | os.PathLike, ledger: Ledger | None = None):
        self.path = path
        self.ledger = ledger if ledger is not None else Ledger()
        self.last_save_error: str | None = None
        self._lock = threading.RLock()

    @classmethod
    def load(cls, path: str | os.PathLike) -> "LedgerStore":
        # SnapshotError propagates: never start from a half-read file
        ledger = load_snapshot(path)
        if ledger is None:
            logger.info("no ledger at %s, starting empty", path)
        store = cls(path, ledger)
        recalculate(store.ledger)
        return store

    @property
    def saved(self) -> bool:
        return self.last_save_error is None

    def view(self) -> LedgerOut:
        with self._lock:
            return LedgerOut(**self.ledger.model_dump(), saved=self.saved)

    def replace_days(self, edits: Iterable[DayEdit]) -> LedgerOut:
        with self._lock:
            by_id = _index(self.ledger.days, "day", edits)

            days: list[DayRow] = []
            for d in self.ledger.days:
                e = by_id.get(d.id)
                if e is None:
                    days.append(d)
                elif not e.delete:
                    days.append(DayRow(id=d.id, date=e.date, hours=e.hours, paid=e.paid))

            self.ledger.days = days
            return self._commit()

    def append_day(self, today: str | None = None) -> tuple[DayRow, bool]:
        """Append a blank day; returns the row and whether the save succeeded."""
        with self._lock:
            row = DayRow(date=today or today_str(), hours=0.0, paid=False)
            self.ledger.days.append(row)
            out = self._commit()
            return row.model_copy(), out.saved

    def replace_rates(self, edits: Iterable[RateEdit]) -> LedgerOut:
        with self._lock:
            by_id = _index(self.ledger.rates, "rate", edits)

            rates: list[RateRow] = []
            for r in self.ledger.rates:
                e = by_id.get(r.id)
                if e is None:
                    rates.append(r)
                elif not e.delete:
                    rates.append(RateRow(id=r.id, effective_date=e.effective_date, rate=e.rate))

            self.ledger.rates = rates
            return self._commit()

    def append_rate(self, today: str | None = None) -> tuple[RateRow, bool]:
        with self._lock:
            row = RateRow(effective_date=today or today_str(), rate=0.0)
            self.ledger.rates.append(row)
            out = self._commit()
            return row.model_copy(), out.saved

    def apply(self, batch: EditBatch) -> LedgerOut:
        with self._lock:
            if batch.form == "days":
                if batch.action == "save":
                    return self.replace_days(batch.days)
                self.append_day()
            else:
                if batch.action == "save":
                    return self.replace_rates(batch.rates)
                self.append_rate()
            return self.view()

    def _commit(self) -> LedgerOut:
        recalculate(self.ledger)
        try:
            save_snapshot(self.path, self.ledger)
        except SnapshotError as e:
            logger.exception("saving ledger failed")
            self.last_save_error = str(e)
        else:
            self.last_save_error = None
        return self.view()


def _index(rows, kind: str, edits) -> dict:
    known = {r.id for r in rows}
    by_id = {}
    for e in edits:
        if e.id not in known:
            raise UnknownRowError(kind, e.id)
        by_id[e.id] = e
    return by_id
