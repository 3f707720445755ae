from __future__ import annotations
from datetime import date as dt_date, time as dt_time
from typing import Optional

from pydantic import Field, field_validator, model_validator

from models import Recurrence, Weekday
from tenancy.views import ApiModel, ClockTime, TenantView

def _date_part(v):
    # "2025-09-05T00:00:00.000Z" -> "2025-09-05"
    if isinstance(v, str) and "T" in v:
        return v.split("T", 1)[0]
    return v

class ScheduleIn(ApiModel):
    subject: str = Field(min_length=1, max_length=255)
    start_time: dt_time
    end_time: dt_time
    day: Weekday
    room: str = Field(min_length=1, max_length=100)
    recurrence: Recurrence
    date: dt_date
    teacher: Optional[str] = Field(None, max_length=255)

    @field_validator("day", mode="before")
    @classmethod
    def _capitalize_day(cls, v):
        return v.strip().capitalize() if isinstance(v, str) else v

    @field_validator("recurrence", mode="before")
    @classmethod
    def _lower_recurrence(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time(cls, v):
        return _date_part(v)

    @field_validator("subject", "room", "teacher")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_range(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self

class ScheduleView(TenantView):
    subject: str
    room: str
    day: Weekday
    start_time: ClockTime
    end_time: ClockTime
    recurrence: Recurrence
    date: dt_date
    teacher: Optional[str] = None
