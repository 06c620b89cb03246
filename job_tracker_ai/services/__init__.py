"""Service exports."""

from .filter_service import filter_by_status, search_applications, summarize_applications
from .html_extractor import collapse_whitespace, extract_signals
from .inference_client import complete_chat
from .page_fetcher import fetch_page
from .prompt_builder import build_prompt, find_job_posting
from .record_store import RecordStore
from .response_validator import validate_response

__all__ = [
    "fetch_page",
    "extract_signals",
    "collapse_whitespace",
    "build_prompt",
    "find_job_posting",
    "complete_chat",
    "validate_response",
    "RecordStore",
    "filter_by_status",
    "search_applications",
    "summarize_applications",
]
