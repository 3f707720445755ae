from __future__ import annotations
from datetime import date as dt_date, time as dt_time
from typing import Optional

from pydantic import Field, field_validator

from models import Priority, RelatedSubject
from tenancy.views import ApiModel, ClockTime, TenantView

_SUBJECTS = {s.value.lower(): s for s in RelatedSubject}

def parse_subject(raw) -> Optional[RelatedSubject]:
    """Case-insensitive lookup of a subject by its display value."""
    if isinstance(raw, RelatedSubject):
        return raw
    if not isinstance(raw, str):
        return None
    return _SUBJECTS.get(" ".join(raw.split()).lower())

class ReminderIn(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    date: Optional[dt_date] = None
    time: dt_time
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    related_to: RelatedSubject = RelatedSubject.OTHER

    @field_validator("title")
    @classmethod
    def _non_empty(cls, v: str):
        if not v.strip():
            raise ValueError("title_required")
        return v.strip()

    @field_validator("priority", mode="before")
    @classmethod
    def _lower(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("related_to", mode="before")
    @classmethod
    def _subject(cls, v):
        return parse_subject(v) or v

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time(cls, v):
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v or None

class ReminderView(TenantView):
    title: str
    description: Optional[str] = None
    date: Optional[dt_date] = None
    time: ClockTime
    completed: bool
    priority: Priority
    related_to: RelatedSubject
