from pydantic import BaseModel, field_validator

from payledger.utils.numbers import parse_number


class RateEdit(BaseModel):
    id: str
    effective_date: str = ""
    rate: float = 0.0
    delete: bool = False

    @field_validator("effective_date", mode="before")
    @classmethod
    def effective_date_trim(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("rate", mode="before")
    @classmethod
    def rate_lenient(cls, v):
        return parse_number(v, "rate")
