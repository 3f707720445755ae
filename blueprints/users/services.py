# blueprints/users/services.py
from __future__ import annotations
from dataclasses import asdict, dataclass
from datetime import date as dt_date, datetime, timezone
from typing import List, Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from flask import current_app

from errors import NotFound
from extensions import db
from models import Announcement, Department, Reminder, Schedule, Section, User, Weekday, Year
from tenancy import TenantContext
from tenancy.query import count_scoped, scoped
from tenancy.views import ApiModel, DepartmentRef, SectionRef, YearRef

# subject -> card colour on the dashboard; matched as a case-insensitive substring
SUBJECT_COLORS = (
    ("cloud computing", "blue"),
    ("computer networks", "green"),
    ("database management system", "purple"),
    ("advanced data structure", "orange"),
    ("service oriented architecture", "orange"),
    ("programming", "indigo"),
    ("other", "red"),
)
DEFAULT_COLOR = "blue"
DEFAULT_ICON = "BookOpen"


def _tz():
    try:
        return ZoneInfo(current_app.config.get("TIMEZONE", "UTC"))
    except ZoneInfoNotFoundError:
        try:
            import tzdata  # noqa
            return ZoneInfo(current_app.config.get("TIMEZONE", "UTC"))
        except Exception:
            return timezone.utc

def today() -> dt_date:
    return datetime.now(_tz()).date()

def subject_color(subject: str) -> str:
    lowered = (subject or "").lower()
    for key, color in SUBJECT_COLORS:
        if key in lowered:
            return color
    return DEFAULT_COLOR


@dataclass
class EnrolledClass:
    subject: str
    location: str
    startTime: str
    endTime: str
    professor: str
    icon: str
    color: str

@dataclass
class UpcomingAssignment:
    title: str
    subject: str
    dueDate: Optional[str]
    priority: str

class ProfileOut(ApiModel):
    id: int
    name: str
    email: str
    role: str
    section: SectionRef
    year: YearRef
    department: DepartmentRef
    created_at: datetime
    updated_at: datetime


def section_stats(ctx: TenantContext) -> dict:
    return {
        "totalAnnouncements": count_scoped(Announcement, ctx),
        "totalReminders": count_scoped(Reminder, ctx),
        "totalSchedules": count_scoped(Schedule, ctx),
    }


def enrolled_classes(ctx: TenantContext, on: Optional[dt_date] = None) -> List[dict]:
    """Weekly slots of the section that fall on ``on``'s weekday (today by default)."""
    on = on or today()
    q = (scoped(Schedule, ctx, day=Weekday.of(on))
         .order_by(Schedule.start_time.asc(), Schedule.id.asc()))
    out: List[dict] = []
    for sch, *_ in q.all():
        out.append(asdict(EnrolledClass(
            subject=sch.subject,
            location=sch.room or "TBA",
            startTime=f"{on.isoformat()}T{sch.start_time.strftime('%H:%M')}:00",
            endTime=f"{on.isoformat()}T{sch.end_time.strftime('%H:%M')}:00",
            professor=sch.teacher or "TBA",
            icon=DEFAULT_ICON,
            color=subject_color(sch.subject),
        )))
    return out


def upcoming_assignments(ctx: TenantContext, on: Optional[dt_date] = None) -> List[dict]:
    """Open reminders of the section due on or after ``on``, soonest first."""
    on = on or today()
    q = (scoped(Reminder, ctx, completed=False)
         .filter(Reminder.date.isnot(None), Reminder.date >= on)
         .order_by(Reminder.date.asc(), Reminder.time.asc(), Reminder.id.asc()))
    return [
        asdict(UpcomingAssignment(
            title=rem.title,
            subject=rem.related_to.value if rem.related_to else "Unknown",
            dueDate=rem.date.isoformat() if rem.date else None,
            priority=rem.priority.value,
        ))
        for rem, *_ in q.all()
    ]


def user_profile(ctx: TenantContext, user_id: int) -> dict:
    # profiles are visible within the caller's own section only
    row = (db.session.query(User, Section, Year, Department)
           .join(Section, Section.id == User.section_id)
           .join(Year, Year.id == User.year_id)
           .join(Department, Department.id == User.department_id)
           .filter(User.id == user_id, User.section_id == ctx.section_id)
           .first())
    if row is None:
        raise NotFound("User not found")
    user, section, year, department = row
    return ProfileOut(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        section=SectionRef.model_validate(section),
        year=YearRef.model_validate(year),
        department=DepartmentRef.model_validate(department),
        created_at=user.created_at,
        updated_at=user.updated_at,
    ).dump()
