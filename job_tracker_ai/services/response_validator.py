"""Validate the model's JSON answer and map it to an ExtractionResult."""

import json
import re
from datetime import date
from typing import Optional

from pydantic import ValidationError

from job_tracker_ai.errors import ResponseValidationError
from job_tracker_ai.schemas.extraction import (
    UNKNOWN_COMPANY,
    UNKNOWN_POSITION,
    ExtractionResult,
    ModelJobFields,
)
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)


def _strip_code_fence(text: str) -> str:
    """Remove an optional markdown code block around the JSON."""
    raw = text.strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    return raw


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_model_json(raw_text: str) -> ModelJobFields:
    """Parse model text into the exact key set; anything else is an upstream fault."""
    try:
        parsed = json.loads(_strip_code_fence(raw_text or ""))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI response as JSON: %r", raw_text)
        raise ResponseValidationError("Failed to parse job data from AI response") from e
    if not isinstance(parsed, dict):
        raise ResponseValidationError("AI response is not a JSON object")
    try:
        return ModelJobFields.model_validate(parsed)
    except ValidationError as e:
        logger.error("AI response does not match the extraction schema: %s", e)
        raise ResponseValidationError(f"AI response does not match the extraction schema: {e}") from e


def validate_response(raw_text: str, today: Optional[date] = None) -> ExtractionResult:
    """
    Map model output to an ExtractionResult. Missing company/position become
    sentinels, missing optional fields stay absent. status and appliedDate are
    always set here, never taken from the model.
    """
    fields = parse_model_json(raw_text)
    applied_on = today or date.today()
    return ExtractionResult(
        company=_present(fields.company) or UNKNOWN_COMPANY,
        position=_present(fields.position) or UNKNOWN_POSITION,
        location=_present(fields.location),
        salary=_present(fields.salary),
        status="APPLIED",
        applied_date=applied_on.isoformat(),
        notes=_present(fields.notes),
    )
