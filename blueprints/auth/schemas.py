from __future__ import annotations
from pydantic import Field, field_validator

from models import Role
from tenancy.views import ApiModel

class LoginIn(ApiModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _norm_email(cls, v: str) -> str:
        return v.strip().lower()

class RegisterIn(LoginIn):
    name: str = Field(min_length=1, max_length=255)
    role: Role = Role.STUDENT
    department_name: str = Field(min_length=1, max_length=255)
    year_value: str = Field(min_length=1, max_length=16)
    section_name: str = Field(min_length=1, max_length=50)

    @field_validator("year_value", mode="before")
    @classmethod
    def _year_as_text(cls, v):
        # yearValue: 1 and yearValue: "1" are the same alias
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("name", "department_name", "section_name")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

class CredentialOut(ApiModel):
    id: int
    name: str
    email: str
    role: str
    section: int
    year: int
    department: int
    token: str
