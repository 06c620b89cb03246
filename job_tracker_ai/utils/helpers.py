"""Helper utilities for the Job Tracker AI system."""

from urllib.parse import urlparse

from job_tracker_ai.errors import InvalidInputError


def validate_job_url(url: str) -> str:
    """Return the trimmed URL if it is an absolute http(s) URL; raise InvalidInputError otherwise."""
    if not url or not str(url).strip():
        raise InvalidInputError("URL is required")
    url = str(url).strip()
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in url):
        raise InvalidInputError("Invalid URL format")
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidInputError("Invalid URL format") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidInputError("Invalid URL format")
    return url
