import datetime as dt
from typing import Annotated
from pydantic import AfterValidator, BaseModel, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

def _real_calendar_date(v: str) -> str:
    # The pattern accepts 2025-13-45; make sure it parses
    try:
        dt.date.fromisoformat(v)
    except ValueError:
        raise ValueError("Invalid date format")
    return v

# Canonical YYYY-MM-DD, the only form the day view matches on
DateStr = Annotated[str, Field(pattern=DATE_PATTERN), AfterValidator(_real_calendar_date)]

class Success(BaseModel):
    success: bool = True
