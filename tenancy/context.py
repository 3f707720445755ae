from __future__ import annotations
from dataclasses import dataclass

from flask_login import UserMixin

from models import Role


@dataclass(frozen=True)
class TenantKey:
    section_id: int
    year_id: int
    department_id: int

    @classmethod
    def of(cls, record) -> "TenantKey":
        return cls(record.section_id, record.year_id, record.department_id)


@dataclass(frozen=True)
class TenantContext(UserMixin):
    """Identity and scope decoded from a bearer credential.

    Built from the token claims only, so a role or section change made after
    issuance is seen only once the user logs in again (at most the token
    lifetime later).
    """
    user_id: int
    role: str
    section_id: int
    year_id: int
    department_id: int

    @property
    def tenant(self) -> TenantKey:
        return TenantKey(self.section_id, self.year_id, self.department_id)

    @property
    def is_cr(self) -> bool:
        return self.role == Role.CR.value

    # Flask-Login
    def get_id(self) -> str:
        return str(self.user_id)

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "role": self.role,
            "section": self.section_id,
            "year": self.year_id,
            "department": self.department_id,
        }
