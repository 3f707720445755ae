from __future__ import annotations
from datetime import date as dt_date, time as dt_time
from enum import Enum as PyEnum

from sqlalchemy import Enum, Date, Time, Index, case
from sqlalchemy.orm import Mapped, mapped_column

from extensions import db
from .base import TenantScoped, enum_values

class Weekday(str, PyEnum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def parse(cls, raw: str | None) -> "Weekday | None":
        """'monday', 'MONDAY', ' Monday ' -> Weekday.MONDAY; unknown -> None."""
        if not raw:
            return None
        try:
            return cls(raw.strip().capitalize())
        except ValueError:
            return None

    @classmethod
    def of(cls, d: dt_date) -> "Weekday":
        return list(cls)[d.weekday()]

class Recurrence(str, PyEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NONE = "none"
    ONCE = "once"


class Schedule(TenantScoped, db.Model):
    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject: Mapped[str] = mapped_column(db.String(255), nullable=False)
    room: Mapped[str] = mapped_column(db.String(100), nullable=False)
    day: Mapped[Weekday] = mapped_column(
        Enum(Weekday, native_enum=False, length=16, values_callable=enum_values), nullable=False
    )
    start_time: Mapped[dt_time] = mapped_column(Time, nullable=False)
    end_time: Mapped[dt_time] = mapped_column(Time, nullable=False)
    recurrence: Mapped[Recurrence] = mapped_column(
        Enum(Recurrence, native_enum=False, length=16, values_callable=enum_values),
        nullable=False, default=Recurrence.ONCE,
    )
    date: Mapped[dt_date] = mapped_column(Date, nullable=False, index=True)
    teacher: Mapped[str | None] = mapped_column(db.String(255))

    __table_args__ = (
        Index("ix_schedules_section_day", "section_id", "day"),
    )

    def __repr__(self):
        return f"<Schedule {self.subject} {self.day.value} {self.start_time}>"


# Monday..Sunday order for ORDER BY (the stored value is the day name)
weekday_order = case(
    {d.value: i for i, d in enumerate(Weekday)},
    value=Schedule.day,
    else_=len(Weekday),
)
