from __future__ import annotations
from datetime import datetime
from enum import Enum

from sqlalchemy import ForeignKey, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column
from werkzeug.security import generate_password_hash, check_password_hash

from extensions import db
from .base import utcnow

class Role(str, Enum):
    STUDENT = "student"
    CR = "cr"
    TEACHER = "teacher"

# roles allowed to author schedules, announcements and reminders
AUTHOR_ROLES = frozenset({Role.TEACHER, Role.CR})


class User(db.Model):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    email: Mapped[str] = mapped_column(db.String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(db.String(255), nullable=False)
    # plain string column so the value does not depend on the DB enum type
    role: Mapped[str] = mapped_column(db.String(16), index=True, nullable=False, default=Role.STUDENT.value)

    section_id: Mapped[int] = mapped_column(ForeignKey("sections.id", ondelete="RESTRICT"), nullable=False, index=True)
    year_id: Mapped[int] = mapped_column(ForeignKey("years.id", ondelete="RESTRICT"), nullable=False)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id", ondelete="RESTRICT"), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    section = relationship("Section", foreign_keys=[section_id])
    year = relationship("Year")
    department = relationship("Department")

    # helpers
    def set_password(self, raw: str):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw: str) -> bool:
        return bool(self.password_hash) and check_password_hash(self.password_hash, raw)

    def __repr__(self):
        return f"<User {self.email}>"
