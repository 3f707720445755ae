from __future__ import annotations
from enum import Enum as PyEnum

from sqlalchemy import Enum, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column

from extensions import db

class YearLabel(str, PyEnum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"
    FOURTH = "FOURTH"

# textual aliases accepted at registration -> canonical label
YEAR_ALIASES = {
    "1": YearLabel.FIRST, "1ST": YearLabel.FIRST, "FIRST": YearLabel.FIRST,
    "2": YearLabel.SECOND, "2ND": YearLabel.SECOND, "SECOND": YearLabel.SECOND,
    "3": YearLabel.THIRD, "3RD": YearLabel.THIRD, "THIRD": YearLabel.THIRD,
    "4": YearLabel.FOURTH, "4TH": YearLabel.FOURTH, "FOURTH": YearLabel.FOURTH,
}

def normalize_year(value: str | None) -> YearLabel | None:
    if not value:
        return None
    return YEAR_ALIASES.get(value.strip().upper())


class Department(db.Model):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(255), unique=True, nullable=False)

    years = relationship("Year", back_populates="department", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Department {self.name}>"


class Year(db.Model):
    __tablename__ = "years"

    id: Mapped[int] = mapped_column(primary_key=True)
    year: Mapped[YearLabel] = mapped_column(Enum(YearLabel, native_enum=False, length=16), nullable=False)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id", ondelete="CASCADE"), nullable=False)

    department = relationship("Department", back_populates="years")
    sections = relationship("Section", back_populates="year", cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint("year", "department_id", name="uq_year_department"),
    )

    def __repr__(self):
        return f"<Year {self.year.value} dept={self.department_id}>"


class Section(db.Model):
    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(50), nullable=False)
    year_id: Mapped[int] = mapped_column(ForeignKey("years.id", ondelete="CASCADE"), nullable=False)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id", ondelete="CASCADE"), nullable=False)
    # weak pointer to the class representative, set when a cr registers here
    cr_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL", use_alter=True, name="fk_sections_cr_id"),
        nullable=True,
    )

    year = relationship("Year", back_populates="sections")
    department = relationship("Department")
    cr = relationship("User", foreign_keys=[cr_id], post_update=True)

    __table_args__ = (
        UniqueConstraint("name", "year_id", "department_id", name="uq_section_year_department"),
        Index("ix_sections_year", "year_id"),
    )

    def __repr__(self):
        return f"<Section {self.name} year={self.year_id}>"
