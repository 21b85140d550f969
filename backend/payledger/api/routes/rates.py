from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from payledger.api.deps import db, ledger_store, not_found
from payledger.core.config import settings
from payledger.schemas.ledger import LedgerOut, RateRow
from payledger.schemas.rate import RateEdit
from payledger.services.audit import batch_details, log_event
from payledger.services.store import LedgerStore, UnknownRowError

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=list[RateRow])
def list_rates(store: LedgerStore = Depends(ledger_store)):
    # Sorted by effective date, unparsable dates last.
    return store.view().rates


@router.post("", response_model=RateRow)
def add_rate(s: Session = Depends(db), store: LedgerStore = Depends(ledger_store)):
    r, saved = store.append_rate()
    log_event(
        s,
        username=settings.audit_username,
        action="rate.add",
        entity_type="rate",
        entity_id=r.id,
        saved=saved,
        details={"effective_date": r.effective_date, "rate": r.rate},
    )
    return r


@router.put("", response_model=LedgerOut)
def save_rates(body: list[RateEdit], s: Session = Depends(db), store: LedgerStore = Depends(ledger_store)):
    try:
        out = store.replace_rates(body)
    except UnknownRowError as e:
        raise not_found(e)

    log_event(
        s,
        username=settings.audit_username,
        action="rates.save",
        entity_type="rate",
        saved=out.saved,
        details=batch_details(body),
    )
    return out
