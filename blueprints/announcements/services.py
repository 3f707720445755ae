# blueprints/announcements/services.py
from __future__ import annotations
from typing import List

from extensions import db
from models import Announcement, Audience, Category, User
from tenancy import ResourceKind, TenantContext
from tenancy.query import scoped, scoped_row
from tenancy.store import create_record, delete_record, update_record
from .schemas import AnnouncementIn, AnnouncementView

KIND = ResourceKind.ANNOUNCEMENT


def _newest_first(q):
    return q.order_by(Announcement.created_at.desc(), Announcement.id.desc())

def _views(q) -> List[dict]:
    return [AnnouncementView.from_row(row).dump() for row in _newest_first(q).all()]

def _parse(enum_cls, raw: str):
    try:
        return enum_cls((raw or "").strip().lower())
    except ValueError:
        return None


def get_announcement(ctx: TenantContext, announcement_id: int) -> dict:
    row = scoped_row(Announcement, ctx, announcement_id, noun="Announcement")
    return AnnouncementView.from_row(row).dump()


def list_announcements(ctx: TenantContext) -> List[dict]:
    return _views(scoped(Announcement, ctx))


def urgent_announcements(ctx: TenantContext) -> List[dict]:
    return _views(scoped(Announcement, ctx, urgent=True))


def announcements_by_category(ctx: TenantContext, raw: str) -> List[dict]:
    category = _parse(Category, raw)
    if category is None:
        return []
    return _views(scoped(Announcement, ctx, category=category))


def announcements_by_audience(ctx: TenantContext, raw: str) -> List[dict]:
    audience = _parse(Audience, raw)
    if audience is None:
        return []
    return _views(scoped(Announcement, ctx, audience=audience))


def create_announcement(ctx: TenantContext, data: AnnouncementIn) -> dict:
    fields = data.model_dump()
    if not fields.get("author"):
        creator = db.session.get(User, ctx.user_id)
        fields["author"] = creator.name if creator else ctx.role
    ann = create_record(Announcement, KIND, ctx, fields)
    return get_announcement(ctx, ann.id)


def update_announcement(ctx: TenantContext, announcement_id: int, data: AnnouncementIn) -> dict:
    # a missing author keeps the current display name
    fields = data.model_dump(exclude={"author"} if not data.author else None)
    ann = update_record(Announcement, KIND, ctx, announcement_id, fields)
    return get_announcement(ctx, ann.id)


def delete_announcement(ctx: TenantContext, announcement_id: int) -> None:
    delete_record(Announcement, KIND, ctx, announcement_id)
