from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from payledger.api.deps import db, ledger_store, not_found
from payledger.core.config import settings
from payledger.schemas.ledger import EditBatch, LedgerOut
from payledger.services.audit import batch_details, log_event
from payledger.services.store import LedgerStore, UnknownRowError

router = APIRouter(prefix="/ledger", tags=["ledger"])

_ACTIONS = {
    ("days", "save"): "days.save",
    ("days", "add"): "day.add",
    ("rates", "save"): "rates.save",
    ("rates", "add"): "rate.add",
}


@router.get("", response_model=LedgerOut)
def ledger(store: LedgerStore = Depends(ledger_store)):
    return store.view()


@router.post("", response_model=LedgerOut)
def edit_ledger(body: EditBatch, s: Session = Depends(db), store: LedgerStore = Depends(ledger_store)):
    try:
        out = store.apply(body)
    except UnknownRowError as e:
        raise not_found(e)

    details = None
    if body.action == "save":
        details = batch_details(body.days if body.form == "days" else body.rates)

    log_event(
        s,
        username=settings.audit_username,
        action=_ACTIONS[(body.form, body.action)],
        entity_type="day" if body.form == "days" else "rate",
        saved=out.saved,
        details=details,
    )
    return out
