from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from payledger.api.deps import db
from payledger.schemas.audit import AuditOut
from payledger.services.audit import list_events

router = APIRouter(prefix="/audit", tags=["audit"])


@router.get("", response_model=list[AuditOut])
def list_audit(
    s: Session = Depends(db),
    entity_type: str | None = Query(default=None),
    action: str | None = Query(default=None),
    limit: int = Query(default=200, ge=1, le=1000),
):
    return list_events(s, action=action, entity_type=entity_type, limit=limit)
