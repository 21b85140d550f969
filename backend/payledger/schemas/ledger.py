from uuid import uuid4

from pydantic import BaseModel, Field
from typing import Literal

from payledger.schemas.day import DayEdit
from payledger.schemas.rate import RateEdit


def new_row_id() -> str:
    return uuid4().hex


class DayRow(BaseModel):
    id: str = Field(default_factory=new_row_id)
    date: str
    hours: float = 0.0
    paid: bool = False

    # derived, rewritten on every recalculation
    pay: float = 0.0
    owed: float = 0.0


class RateRow(BaseModel):
    id: str = Field(default_factory=new_row_id)
    effective_date: str
    rate: float = 0.0


class DaysTotal(BaseModel):
    hours: float = 0.0
    pay: float = 0.0
    owed: float = 0.0


class Ledger(BaseModel):
    days: list[DayRow] = Field(default_factory=list)
    days_total: DaysTotal = Field(default_factory=DaysTotal)
    rates: list[RateRow] = Field(default_factory=list)


class LedgerOut(Ledger):
    saved: bool = True


class EditBatch(BaseModel):
    form: Literal["days", "rates"]
    action: Literal["save", "add"]
    days: list[DayEdit] = Field(default_factory=list)
    rates: list[RateEdit] = Field(default_factory=list)
