"""Structured job fields produced by the scrape pipeline."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_POSITION = "Unknown Position"


class ModelJobFields(BaseModel):
    """Exact JSON object the language model is instructed to return."""

    model_config = ConfigDict(extra="forbid", strict=True)

    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("salary", mode="before")
    @classmethod
    def _numeric_salary(cls, value):
        # Models sometimes answer a bare number, e.g. 120000
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ExtractionResult(BaseModel):
    """Form pre-fill data for a new job application."""

    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(..., min_length=1, description="Employer name or sentinel")
    position: str = Field(..., min_length=1, description="Job title or sentinel")
    location: Optional[str] = Field(default=None, description="'City, State' or 'Remote'")
    salary: Optional[str] = Field(default=None, description="Compensation incl. currency/range")
    status: Literal["APPLIED"] = "APPLIED"
    applied_date: str = Field(..., alias="appliedDate", description="ISO date (YYYY-MM-DD)")
    notes: Optional[str] = Field(default=None, description="Short summary of requirements/benefits")

    def to_response(self) -> dict:
        """JSON body for API responses; absent optional fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
