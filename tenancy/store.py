from __future__ import annotations
import logging
from typing import Any

from errors import ApiError, NotFound
from extensions import db
from .context import TenantContext
from .policy import Action, ResourceKind, authorize

log = logging.getLogger(__name__)


def _authorize(action: Action, kind: ResourceKind, ctx: TenantContext, record=None) -> None:
    try:
        authorize(action, kind, ctx, record)
    except ApiError as err:
        log.warning("%s %s denied for user %s (%s)", action.value, kind.value, ctx.user_id, err.code)
        raise


def _load(model, kind: ResourceKind, record_id: int):
    record = db.session.get(model, record_id)
    if record is None:
        raise NotFound(f"{kind.value.capitalize()} not found")
    return record


def create_record(model, kind: ResourceKind, ctx: TenantContext, fields: dict[str, Any]):
    """Insert with tenant key and creator taken from ``ctx``, never from ``fields``."""
    _authorize(Action.CREATE, kind, ctx)
    record = model(**fields)
    record.section_id = ctx.section_id
    record.year_id = ctx.year_id
    record.department_id = ctx.department_id
    record.created_by_id = ctx.user_id
    db.session.add(record)
    db.session.commit()
    log.info("%s %s created by user %s in section %s", kind.value, record.id, ctx.user_id, ctx.section_id)
    return record


def update_record(model, kind: ResourceKind, ctx: TenantContext, record_id: int, fields: dict[str, Any]):
    """Replace the mutable fields; tenant key and creator stay as created."""
    record = _load(model, kind, record_id)
    _authorize(Action.UPDATE, kind, ctx, record)
    for name, value in fields.items():
        setattr(record, name, value)
    db.session.commit()
    log.info("%s %s updated by user %s", kind.value, record.id, ctx.user_id)
    return record


def delete_record(model, kind: ResourceKind, ctx: TenantContext, record_id: int) -> None:
    record = _load(model, kind, record_id)
    _authorize(Action.DELETE, kind, ctx, record)
    db.session.delete(record)
    db.session.commit()
    log.info("%s %s deleted by user %s", kind.value, record_id, ctx.user_id)
