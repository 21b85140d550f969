from __future__ import annotations

from typing import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from payledger.models.audit_log import AuditLog


def log_event(
    s: Session,
    username: str,
    action: str,
    entity_type: str,
    entity_id: str | None = None,
    saved: bool = True,
    details: dict | None = None,
) -> AuditLog:
    row = AuditLog(
        username=username,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        saved=saved,
        details=details,
    )
    s.add(row)
    s.commit()
    return row


def batch_details(edits: Iterable) -> dict:
    """Ids touched by a save batch, split into updated and deleted."""
    updated: list[str] = []
    deleted: list[str] = []
    for e in edits:
        (deleted if e.delete else updated).append(e.id)
    return {"updated": updated, "deleted": deleted}


def list_events(
    s: Session,
    action: str | None = None,
    entity_type: str | None = None,
    limit: int = 200,
) -> list[AuditLog]:
    q = select(AuditLog).order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
    if action:
        q = q.where(AuditLog.action == action)
    if entity_type:
        q = q.where(AuditLog.entity_type == entity_type)
    return list(s.execute(q.limit(limit)).scalars().all())
