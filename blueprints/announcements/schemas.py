from __future__ import annotations
from datetime import date as dt_date
from typing import Optional

from pydantic import Field, field_validator

from models import Audience, Category
from tenancy.views import ApiModel, TenantView

class AnnouncementIn(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field("", max_length=10000)
    # display name; defaults to the creator's name
    author: Optional[str] = Field(None, max_length=255)
    date: Optional[dt_date] = None
    urgent: bool = False
    category: Category = Category.GENERAL
    audience: Audience = Audience.ALL

    @field_validator("title")
    @classmethod
    def _non_empty(cls, v: str):
        if not v.strip():
            raise ValueError("title_required")
        return v.strip()

    @field_validator("category", "audience", mode="before")
    @classmethod
    def _lower(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time(cls, v):
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v or None

class AnnouncementView(TenantView):
    title: str
    content: str
    author: str
    date: Optional[dt_date] = None
    urgent: bool
    category: Category
    audience: Audience
