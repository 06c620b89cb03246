"""Schema exports."""

from .application import ApplicationStatus, JobApplication, JobApplicationCreate, JobApplicationUpdate
from .extraction import ExtractionResult, ModelJobFields
from .page import ExtractedSignals, PromptPayload, RawPage

__all__ = [
    "ApplicationStatus",
    "ExtractedSignals",
    "ExtractionResult",
    "JobApplication",
    "JobApplicationCreate",
    "JobApplicationUpdate",
    "ModelJobFields",
    "PromptPayload",
    "RawPage",
]
