"""Access control for section-scoped resources.

``decide`` is a pure function of the caller's context and the resource's tenant
key and owner. Update and delete rules live in ``POLICIES`` so that the rules
for each resource kind are visible side by side:

* create: teacher or cr
* read:   anyone authenticated, same section only; other sections look absent
* update: teacher or cr in the same section, ownership not required
* delete: same section, and the caller created the record or is a cr
  (the teacher|cr gate in front of the delete routes is a separate check)
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from errors import ApiError, Forbidden, NotFound, Unauthenticated
from models import AUTHOR_ROLES, Role
from .context import TenantContext, TenantKey


class Action(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class ResourceKind(str, Enum):
    SCHEDULE = "schedule"
    ANNOUNCEMENT = "announcement"
    REMINDER = "reminder"


class Reason(str, Enum):
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UNAUTHENTICATED = "unauthenticated"


_ERRORS: dict[Reason, type[ApiError]] = {
    Reason.FORBIDDEN: Forbidden,
    Reason.NOT_FOUND: NotFound,
    Reason.UNAUTHENTICATED: Unauthenticated,
}


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[Reason] = None

    def __bool__(self) -> bool:
        return self.allowed

    def error(self, message: str | None = None) -> ApiError:
        return _ERRORS[self.reason or Reason.FORBIDDEN](message)


ALLOW = Decision(True)

def deny(reason: Reason) -> Decision:
    return Decision(False, reason)


# ---------- predicates: (ctx, owner_id) -> bool ----------
Predicate = Callable[[TenantContext, Optional[int]], bool]

def author_role(ctx: TenantContext, owner_id: Optional[int]) -> bool:
    return ctx.role in AUTHOR_ROLES

def is_owner(ctx: TenantContext, owner_id: Optional[int]) -> bool:
    return owner_id is not None and owner_id == ctx.user_id

def is_cr(ctx: TenantContext, owner_id: Optional[int]) -> bool:
    return ctx.role == Role.CR.value

def any_of(*preds: Predicate) -> Predicate:
    return lambda ctx, owner_id: any(p(ctx, owner_id) for p in preds)


@dataclass(frozen=True)
class ResourcePolicy:
    create: Predicate = author_role
    update: Predicate = author_role
    delete: Predicate = any_of(is_owner, is_cr)


POLICIES: dict[ResourceKind, ResourcePolicy] = {
    ResourceKind.SCHEDULE: ResourcePolicy(),
    ResourceKind.ANNOUNCEMENT: ResourcePolicy(),
    ResourceKind.REMINDER: ResourcePolicy(),
}


def decide(
    action: Action,
    kind: ResourceKind,
    ctx: Optional[TenantContext],
    resource_tenant: Optional[TenantKey] = None,
    owner_id: Optional[int] = None,
) -> Decision:
    if ctx is None:
        return deny(Reason.UNAUTHENTICATED)
    policy = POLICIES[kind]

    if action is Action.CREATE:
        return ALLOW if policy.create(ctx, None) else deny(Reason.FORBIDDEN)

    # tenant mismatch hides the record instead of refusing it
    if resource_tenant is None or resource_tenant.section_id != ctx.section_id:
        return deny(Reason.NOT_FOUND)

    if action is Action.READ:
        return ALLOW
    if action is Action.UPDATE:
        return ALLOW if policy.update(ctx, owner_id) else deny(Reason.FORBIDDEN)
    if action is Action.DELETE:
        return ALLOW if policy.delete(ctx, owner_id) else deny(Reason.FORBIDDEN)
    raise ValueError(f"unknown action {action!r}")


def _message(decision: Decision, action: Action, kind: ResourceKind) -> str | None:
    noun = kind.value
    if decision.reason is Reason.NOT_FOUND:
        return f"{noun.capitalize()} not found"
    if decision.reason is Reason.FORBIDDEN:
        if action is Action.CREATE:
            return f"Only CR and Teachers can create {noun}s"
        return f"Not authorized to {action.value} this {noun}"
    return None


def authorize(action: Action, kind: ResourceKind, ctx, resource=None) -> None:
    """Raise the mapped ApiError when ``decide`` denies ``action`` on ``resource``."""
    tenant = TenantKey.of(resource) if resource is not None else None
    owner_id = getattr(resource, "created_by_id", None)
    decision = decide(action, kind, ctx, tenant, owner_id)
    if not decision:
        raise decision.error(_message(decision, action, kind))
