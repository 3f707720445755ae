from __future__ import annotations
from datetime import date, datetime, time
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from errors import ValidationFailed
from models import YearLabel

def _hhmm(t: time) -> str:
    return t.strftime("%H:%M")

def parse_iso_date(raw: str | None) -> date:
    """'2025-09-05' or '2025-09-05T00:00:00Z' -> date; anything else is a 400."""
    try:
        return date.fromisoformat((raw or "").split("T", 1)[0])
    except ValueError:
        raise ValidationFailed("Invalid date format")

# "09:00" on the wire, datetime.time in Python
ClockTime = Annotated[time, PlainSerializer(_hhmm, return_type=str, when_used="json")]


class ApiModel(BaseModel):
    """camelCase on the wire (startTime, relatedTo, createdBy), snake_case in code."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# ---------- joined references ----------
class SectionRef(ApiModel):
    id: int
    name: str

class YearRef(ApiModel):
    id: int
    year: YearLabel

class DepartmentRef(ApiModel):
    id: int
    name: str

class CreatorRef(ApiModel):
    id: int
    name: str
    email: str
    role: str

_JOINED = {"section", "year", "department", "created_by"}


class TenantView(ApiModel):
    """Denormalized read model: record fields plus section/year/department/creator."""
    id: int
    section: SectionRef
    year: YearRef
    department: DepartmentRef
    created_by: Optional[CreatorRef] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row):
        record, section, year, department, creator = row
        data = {name: getattr(record, name) for name in cls.model_fields if name not in _JOINED}
        data.update(
            section=SectionRef.model_validate(section),
            year=YearRef.model_validate(year),
            department=DepartmentRef.model_validate(department),
            created_by=CreatorRef.model_validate(creator) if creator is not None else None,
        )
        return cls.model_validate(data)
