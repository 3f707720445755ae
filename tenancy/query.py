from __future__ import annotations
from typing import Any

from sqlalchemy.orm import Query, aliased

from errors import NotFound
from extensions import db
from models import Department, Section, User, Year
from .context import TenantContext


def joined(model) -> Query:
    """(record, Section, Year, Department, creator|None) rows for ``model``."""
    creator = aliased(User)
    return (db.session.query(model, Section, Year, Department, creator)
            .join(Section, Section.id == model.section_id)
            .join(Year, Year.id == model.year_id)
            .join(Department, Department.id == model.department_id)
            .outerjoin(creator, creator.id == model.created_by_id))


def scoped(model, ctx: TenantContext, **equals: Any) -> Query:
    """Joined rows restricted to the caller's section, optionally narrowed by equality filters."""
    q = joined(model).filter(model.section_id == ctx.section_id)
    for field, value in equals.items():
        q = q.filter(getattr(model, field) == value)
    return q


def scoped_row(model, ctx: TenantContext, record_id: int, *, noun: str):
    row = scoped(model, ctx).filter(model.id == record_id).first()
    if row is None:
        raise NotFound(f"{noun} not found")
    return row


def count_scoped(model, ctx: TenantContext, *criteria) -> int:
    return (db.session.query(model)
            .filter(model.section_id == ctx.section_id, *criteria)
            .count())
