from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone

from flask import current_app
from jose import JWTError, jwt

from errors import Unauthenticated
from models import Role
from .context import TenantContext

log = logging.getLogger(__name__)

CLAIMS = ("id", "role", "section", "year", "department")


def issue_credential(user, *, now: datetime | None = None) -> str:
    """Sign a bearer token embedding the user's resolved tenant identifiers."""
    cfg = current_app.config
    issued = now or datetime.now(timezone.utc)
    claims = {
        "id": str(user.id),
        "role": user.role,
        "section": str(user.section_id),
        "year": str(user.year_id),
        "department": str(user.department_id),
        "iat": issued,
        "exp": issued + timedelta(days=cfg["JWT_EXPIRES_DAYS"]),
    }
    return jwt.encode(claims, cfg["JWT_SECRET"], algorithm=cfg["JWT_ALGORITHM"])


def resolve_credential(token: str | None) -> TenantContext:
    """Verify signature and expiry and decode the tenant context. No DB access."""
    if not token:
        raise Unauthenticated("No token provided")
    cfg = current_app.config
    try:
        payload = jwt.decode(token, cfg["JWT_SECRET"], algorithms=[cfg["JWT_ALGORITHM"]])
    except JWTError as e:
        log.info("credential rejected: %s", e)
        raise Unauthenticated("Invalid token") from e

    if any(payload.get(k) in (None, "") for k in CLAIMS):
        raise Unauthenticated("Invalid token")
    if payload["role"] not in {r.value for r in Role}:
        raise Unauthenticated("Invalid token")
    try:
        return TenantContext(
            user_id=int(payload["id"]),
            role=payload["role"],
            section_id=int(payload["section"]),
            year_id=int(payload["year"]),
            department_id=int(payload["department"]),
        )
    except (TypeError, ValueError) as e:
        raise Unauthenticated("Invalid token") from e


def bearer_token(header: str | None) -> str | None:
    """'Bearer abc' -> 'abc'; anything else -> None."""
    scheme, _, token = (header or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
