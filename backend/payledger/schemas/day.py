import logging

from pydantic import BaseModel, field_validator

from payledger.utils.numbers import parse_number

logger = logging.getLogger(__name__)


class DayEdit(BaseModel):
    id: str
    date: str = ""
    hours: float = 0.0
    paid: bool = False
    delete: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def date_trim(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("hours", mode="before")
    @classmethod
    def hours_lenient(cls, v):
        hours = parse_number(v, "hours")
        # hours are never negative; one bad cell must not sink the batch
        if hours < 0:
            logger.warning("negative hours %r, using 0", v)
            return 0.0
        return hours
