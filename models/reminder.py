from __future__ import annotations
from datetime import date as dt_date, time as dt_time
from enum import Enum as PyEnum

from sqlalchemy import Enum, Boolean, Date, Time, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from extensions import db
from .base import TenantScoped, enum_values

class Priority(str, PyEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class RelatedSubject(str, PyEnum):
    CLOUD_COMPUTING = "Cloud Computing"
    COMPUTER_NETWORKS = "Computer Networks"
    DBMS = "DataBase Management System"
    ADVANCED_DATA_STRUCTURE = "Advanced Data Structure"
    SOA = "Service Oriented Architecture"
    OOP = "Object Oriented Programming"
    OTHER = "Other"


class Reminder(TenantScoped, db.Model):
    __tablename__ = "reminders"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    date: Mapped[dt_date | None] = mapped_column(Date)
    time: Mapped[dt_time] = mapped_column(Time, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, native_enum=False, length=16, values_callable=enum_values),
        nullable=False, default=Priority.MEDIUM,
    )
    related_to: Mapped[RelatedSubject] = mapped_column(
        Enum(RelatedSubject, native_enum=False, length=64, values_callable=enum_values),
        nullable=False, default=RelatedSubject.OTHER,
    )

    __table_args__ = (
        Index("ix_reminders_section_date", "section_id", "date"),
    )

    def __repr__(self):
        return f"<Reminder {self.title}>"
