"""Job application records owned by a user."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ApplicationStatus = Literal["APPLIED", "INTERVIEWING", "OFFERED", "REJECTED", "WITHDRAWN", "ACCEPTED"]

_OPTIONAL_TEXT_FIELDS = ("location", "salary", "notes")


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobApplicationCreate(_CamelModel):
    """Fields accepted when recording a new application."""

    company: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    location: Optional[str] = None
    salary: Optional[str] = None
    status: ApplicationStatus = "APPLIED"
    applied_date: date = Field(default_factory=date.today)
    notes: Optional[str] = None

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _optional_text(cls, value):
        return _blank_to_none(value)


class JobApplicationUpdate(_CamelModel):
    """Partial update; only fields present in the request are changed."""

    company: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    salary: Optional[str] = None
    status: Optional[ApplicationStatus] = None
    applied_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _optional_text(cls, value):
        return _blank_to_none(value)


class JobApplication(_CamelModel):
    """Stored application as returned by the record store."""

    id: str
    company: str
    position: str
    location: Optional[str] = None
    salary: Optional[str] = None
    status: ApplicationStatus = "APPLIED"
    applied_date: date
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
