from __future__ import annotations
from datetime import date as dt_date
from enum import Enum as PyEnum

from sqlalchemy import Enum, Boolean, Date, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from extensions import db
from .base import TenantScoped, enum_values

class Category(str, PyEnum):
    GENERAL = "general"
    ACADEMIC = "academic"
    EVENT = "event"
    OTHER = "other"
    ASSIGNMENT = "assignment"
    EXAM = "exam"

class Audience(str, PyEnum):
    ALL = "all"
    STUDENTS = "students"
    TEACHERS = "teachers"
    PARENTS = "parents"


class Announcement(TenantScoped, db.Model):
    __tablename__ = "announcements"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # display name only; ownership goes through created_by_id
    author: Mapped[str] = mapped_column(db.String(255), nullable=False)
    date: Mapped[dt_date | None] = mapped_column(Date)
    urgent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category: Mapped[Category] = mapped_column(
        Enum(Category, native_enum=False, length=16, values_callable=enum_values),
        nullable=False, default=Category.GENERAL,
    )
    audience: Mapped[Audience] = mapped_column(
        Enum(Audience, native_enum=False, length=16, values_callable=enum_values),
        nullable=False, default=Audience.ALL,
    )

    __table_args__ = (
        Index("ix_announcements_section_created", "section_id", "created_at"),
    )

    def __repr__(self):
        return f"<Announcement {self.title}>"
