from fastapi import HTTPException, Request
from payledger.db.session import SessionLocal
from payledger.services.store import LedgerStore, UnknownRowError


def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


def ledger_store(request: Request) -> LedgerStore:
    return request.app.state.store


def not_found(e: UnknownRowError) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{e.kind}_not_found")
