"""Async HTTP page fetcher for public job posting URLs."""

import asyncio
from typing import Optional

import httpx

from job_tracker_ai.config import (
    FETCH_BACKOFF_SECONDS,
    FETCH_HEADERS,
    FETCH_MAX_ATTEMPTS,
    HTTP_TIMEOUT_SECONDS,
)
from job_tracker_ai.errors import FetchError, InvalidInputError
from job_tracker_ai.schemas.page import RawPage
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)


async def fetch_page(
    url: str,
    max_attempts: int = FETCH_MAX_ATTEMPTS,
    backoff_seconds: float = FETCH_BACKOFF_SECONDS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RawPage:
    """
    Fetch a public page with browser-like headers, following redirects.
    Any non-2xx status or network error counts as a failed attempt; attempts are
    strictly sequential with a linear backoff (attempt * backoff_seconds).
    Raises FetchError with the last failure's message once attempts run out.
    """
    if max_attempts < 1:
        raise InvalidInputError("max_attempts must be at least 1")

    last_error: Optional[str] = None
    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=HTTP_TIMEOUT_SECONDS,
        headers=FETCH_HEADERS,
        transport=transport,
    ) as client:
        for attempt in range(1, max_attempts + 1):
            try:
                response = await client.get(url)
                response.raise_for_status()
                logger.info("Fetched %s (status=%s, attempt %s)", url, response.status_code, attempt)
                return RawPage(
                    url=url,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    text=response.text,
                )
            except httpx.InvalidURL as e:
                # Same URL would fail every attempt
                logger.error("Invalid URL %r: %s", url, e)
                raise FetchError(f"Invalid URL: {e}") from e
            except httpx.HTTPStatusError as e:
                last_error = f"HTTP {e.response.status_code}: {e.response.reason_phrase}"
                logger.warning("HTTP error for %s (attempt %s/%s): %s", url, attempt, max_attempts, last_error)
            except httpx.HTTPError as e:
                last_error = str(e) or type(e).__name__
                logger.warning("Request failed for %s (attempt %s/%s): %s", url, attempt, max_attempts, last_error)
            if attempt < max_attempts:
                await asyncio.sleep(backoff_seconds * attempt)  # Backoff

    logger.error("Failed to fetch %s after %s attempts: %s", url, max_attempts, last_error)
    raise FetchError(last_error or "Failed to fetch after retries")
