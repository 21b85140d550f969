from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from payledger.api.deps import db, ledger_store, not_found
from payledger.core.config import settings
from payledger.schemas.day import DayEdit
from payledger.schemas.ledger import DayRow, LedgerOut
from payledger.services.audit import batch_details, log_event
from payledger.services.store import LedgerStore, UnknownRowError

router = APIRouter(prefix="/days", tags=["days"])


@router.get("", response_model=list[DayRow])
def list_days(store: LedgerStore = Depends(ledger_store)):
    return store.view().days


@router.post("", response_model=DayRow)
def add_day(s: Session = Depends(db), store: LedgerStore = Depends(ledger_store)):
    row, saved = store.append_day()
    log_event(
        s,
        username=settings.audit_username,
        action="day.add",
        entity_type="day",
        entity_id=row.id,
        saved=saved,
        details={"date": row.date},
    )
    return row


@router.put("", response_model=LedgerOut)
def save_days(body: list[DayEdit], s: Session = Depends(db), store: LedgerStore = Depends(ledger_store)):
    try:
        out = store.replace_days(body)
    except UnknownRowError as e:
        raise not_found(e)

    log_event(
        s,
        username=settings.audit_username,
        action="days.save",
        entity_type="day",
        saved=out.saved,
        details=batch_details(body),
    )
    return out
