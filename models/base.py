from __future__ import annotations
from datetime import datetime, timezone

from sqlalchemy import ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, declared_attr, relationship


class TenantScoped:
    """Columns shared by every section-scoped record.

    The tenant key (section, year, department) and the creator are stamped from
    the caller's credential on insert and never reassigned afterwards.
    """

    @declared_attr
    def section_id(cls) -> Mapped[int]:
        return mapped_column(ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True)

    @declared_attr
    def year_id(cls) -> Mapped[int]:
        return mapped_column(ForeignKey("years.id", ondelete="CASCADE"), nullable=False)

    @declared_attr
    def department_id(cls) -> Mapped[int]:
        return mapped_column(ForeignKey("departments.id", ondelete="CASCADE"), nullable=False)

    @declared_attr
    def created_by_id(cls) -> Mapped[int | None]:
        return mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime, default=utcnow, nullable=False)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    @declared_attr
    def created_by(cls):
        return relationship("User")


def utcnow() -> datetime:
    """Naive UTC timestamp, the form the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def enum_values(enum_cls):
    """Store str-enums by value ("Monday", "high") rather than by member name."""
    return [m.value for m in enum_cls]
