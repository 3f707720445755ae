# blueprints/auth/services.py
from __future__ import annotations
import logging
import time

from flask import current_app

from errors import Conflict, NotFound, TooManyAttempts, Unauthenticated
from extensions import db
from models import Department, Role, Section, User, Year, normalize_year
from tenancy import issue_credential
from .schemas import CredentialOut, LoginIn, RegisterIn

log = logging.getLogger(__name__)

DEFAULT_RL_MAX = 10
DEFAULT_RL_WIN = 300  # 5 minutes
_login_attempts: dict[str, list[float]] = {}  # key: ip|email -> [timestamps]


def _credential(user: User) -> CredentialOut:
    return CredentialOut(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        section=user.section_id,
        year=user.year_id,
        department=user.department_id,
        token=issue_credential(user),
    )


def resolve_tenant(department_name: str, year_value: str, section_name: str) -> tuple[Department, Year, Section]:
    """Department -> year -> section, stopping at the first step without a match."""
    department = Department.query.filter_by(name=department_name).first()
    if not department:
        raise NotFound("Department not found")

    label = normalize_year(year_value)
    year = (Year.query.filter_by(year=label, department_id=department.id).first()
            if label else None)
    if not year:
        raise NotFound("Year not found for this department")

    section = Section.query.filter_by(name=section_name, year_id=year.id,
                                      department_id=department.id).first()
    if not section:
        raise NotFound("Section not found for this year")
    return department, year, section


def register_user(data: RegisterIn) -> CredentialOut:
    if User.query.filter_by(email=data.email).first():
        raise Conflict("User already exists")

    department, year, section = resolve_tenant(data.department_name, data.year_value, data.section_name)

    user = User(
        name=data.name,
        email=data.email,
        role=data.role.value,
        section_id=section.id,
        year_id=year.id,
        department_id=department.id,
    )
    user.set_password(data.password)
    db.session.add(user)
    db.session.flush()
    if data.role is Role.CR:
        section.cr_id = user.id
    db.session.commit()

    log.info("registered user %s role=%s section=%s", user.id, user.role, section.id)
    return _credential(user)


# ---------- rate limit ----------
def _rl_check_and_hit(key: str) -> bool:
    now = time.time()
    win = current_app.config.get("AUTH_RL_WINDOW", DEFAULT_RL_WIN)
    mx = current_app.config.get("AUTH_RL_MAX", DEFAULT_RL_MAX)
    bucket = _login_attempts.setdefault(key, [])
    cutoff = now - win
    while bucket and bucket[0] < cutoff:
        bucket.pop(0)
    if len(bucket) >= mx:
        return False
    bucket.append(now)
    return True


def authenticate(data: LoginIn, *, client_ip: str = "0.0.0.0") -> CredentialOut:
    if not _rl_check_and_hit(f"{client_ip}|{data.email}"):
        log.warning("login throttled for %s", data.email)
        raise TooManyAttempts()

    user: User | None = User.query.filter_by(email=data.email).first()
    if not user or not user.check_password(data.password):
        raise Unauthenticated("Invalid credentials")
    return _credential(user)
