# blueprints/reminders/services.py
from __future__ import annotations
from typing import List

from models import Priority, Reminder
from tenancy import ResourceKind, TenantContext
from tenancy.query import scoped, scoped_row
from tenancy.store import create_record, delete_record, update_record
from .schemas import ReminderIn, ReminderView, parse_subject

KIND = ResourceKind.REMINDER


def _due_order(q):
    return q.order_by(Reminder.date.asc(), Reminder.time.asc(), Reminder.id.asc())

def _views(q) -> List[dict]:
    return [ReminderView.from_row(row).dump() for row in _due_order(q).all()]


def get_reminder(ctx: TenantContext, reminder_id: int) -> dict:
    row = scoped_row(Reminder, ctx, reminder_id, noun="Reminder")
    return ReminderView.from_row(row).dump()


def list_reminders(ctx: TenantContext) -> List[dict]:
    return _views(scoped(Reminder, ctx))


def pending_reminders(ctx: TenantContext) -> List[dict]:
    return _views(scoped(Reminder, ctx, completed=False))


def reminders_by_priority(ctx: TenantContext, raw: str) -> List[dict]:
    try:
        priority = Priority((raw or "").strip().lower())
    except ValueError:
        return []
    return _views(scoped(Reminder, ctx, priority=priority))


def reminders_by_subject(ctx: TenantContext, raw: str) -> List[dict]:
    subject = parse_subject(raw)
    if subject is None:
        return []
    return _views(scoped(Reminder, ctx, related_to=subject))


def create_reminder(ctx: TenantContext, data: ReminderIn) -> dict:
    rem = create_record(Reminder, KIND, ctx, data.model_dump())
    return get_reminder(ctx, rem.id)


def update_reminder(ctx: TenantContext, reminder_id: int, data: ReminderIn) -> dict:
    rem = update_record(Reminder, KIND, ctx, reminder_id, data.model_dump())
    return get_reminder(ctx, rem.id)


def delete_reminder(ctx: TenantContext, reminder_id: int) -> None:
    delete_record(Reminder, KIND, ctx, reminder_id)
