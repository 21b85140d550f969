from sqlalchemy import Boolean, Integer, DateTime, func, String, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from payledger.db.base import Base


class AuditLog(Base):
    """One row per accepted ledger edit."""

    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now(), index=True)

    username: Mapped[str] = mapped_column(String(64), index=True)
    # day.add | days.save | rate.add | rates.save
    action: Mapped[str] = mapped_column(String(64), index=True)

    entity_type: Mapped[str] = mapped_column(String(16), index=True)
    entity_id: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # false when the edit stayed in memory because the ledger file write failed
    saved: Mapped[bool] = mapped_column(Boolean, default=True)

    details: Mapped[dict | None] = mapped_column(JSON, nullable=True)


Index("ix_audit_logs_entity", AuditLog.entity_type, AuditLog.entity_id)
