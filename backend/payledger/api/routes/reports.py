from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from io import BytesIO

from payledger.api.deps import ledger_store
from payledger.services.reports import build_ledger_report
from payledger.services.store import LedgerStore
from payledger.utils.dates import today_str

router = APIRouter(prefix="/ledger/report", tags=["reports"])


@router.get("")
def report(store: LedgerStore = Depends(ledger_store)):
    buf = BytesIO()
    build_ledger_report(store.view(), buf)
    buf.seek(0)

    filename = f"ledger_{today_str()}.xlsx"
    return StreamingResponse(
        buf,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
