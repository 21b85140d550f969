import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payledger.core.config import settings
from payledger.api.routes.ledger import router as ledger_router
from payledger.api.routes.days import router as days_router
from payledger.api.routes.rates import router as rates_router
from payledger.api.routes.reports import router as reports_router
from payledger.api.routes.audit import router as audit_router
from payledger.db.base import Base
from payledger.db.session import engine
from payledger.models.audit_log import AuditLog  # noqa: F401
from payledger.services.store import LedgerStore

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI()

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "ok"}

app.include_router(reports_router)
app.include_router(ledger_router)
app.include_router(days_router)
app.include_router(rates_router)
app.include_router(audit_router)

@app.on_event("startup")
def _load_ledger():
    Base.metadata.create_all(engine)
    # a broken ledger file aborts startup
    app.state.store = LedgerStore.load(settings.ledger_file)
    logging.info("ledger loaded from %s", settings.ledger_file)
