"""Utility exports."""

from .helpers import validate_job_url
from .logger import get_logger

__all__ = ["get_logger", "validate_job_url"]
