# blueprints/schedules/services.py
from __future__ import annotations
from datetime import date
from typing import List

from errors import NotFound
from models import Schedule, Weekday, weekday_order
from tenancy import ResourceKind, TenantContext
from tenancy.query import scoped, scoped_row
from tenancy.store import create_record, delete_record, update_record
from .schemas import ScheduleIn, ScheduleView

KIND = ResourceKind.SCHEDULE


def _views(q) -> List[dict]:
    return [ScheduleView.from_row(row).dump() for row in q.all()]


def get_schedule(ctx: TenantContext, schedule_id: int) -> dict:
    return ScheduleView.from_row(scoped_row(Schedule, ctx, schedule_id, noun="Schedule")).dump()


def list_schedules(ctx: TenantContext) -> List[dict]:
    q = scoped(Schedule, ctx).order_by(Schedule.date.asc(), Schedule.start_time.asc(), Schedule.id.asc())
    return _views(q)


def schedules_on_date(ctx: TenantContext, on: date) -> List[dict]:
    q = scoped(Schedule, ctx, date=on).order_by(Schedule.start_time.asc(), Schedule.id.asc())
    return _views(q)


def schedules_for_day(ctx: TenantContext, raw_day: str) -> List[dict]:
    """Weekly slots of one weekday; raises NotFound when there are none."""
    day = Weekday.parse(raw_day)
    items: List[dict] = []
    if day is not None:
        q = scoped(Schedule, ctx, day=day).order_by(Schedule.start_time.asc(), Schedule.id.asc())
        items = _views(q)
    if not items:
        raise NotFound("No schedules found for this day")
    return items


def schedules_for_teacher(ctx: TenantContext, teacher: str) -> List[dict]:
    q = (scoped(Schedule, ctx, teacher=teacher)
         .order_by(weekday_order, Schedule.start_time.asc(), Schedule.id.asc()))
    items = _views(q)
    if not items:
        raise NotFound("No schedules found for this teacher")
    return items


def create_schedule(ctx: TenantContext, data: ScheduleIn) -> dict:
    sch = create_record(Schedule, KIND, ctx, data.model_dump())
    return get_schedule(ctx, sch.id)


def update_schedule(ctx: TenantContext, schedule_id: int, data: ScheduleIn) -> dict:
    sch = update_record(Schedule, KIND, ctx, schedule_id, data.model_dump())
    return get_schedule(ctx, sch.id)


def delete_schedule(ctx: TenantContext, schedule_id: int) -> None:
    delete_record(Schedule, KIND, ctx, schedule_id)
