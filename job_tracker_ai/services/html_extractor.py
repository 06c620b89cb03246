"""Read title, meta tags, JSON-LD and main content text from job posting HTML."""

import json
import re
from typing import Any, List, Optional, Sequence

from bs4 import BeautifulSoup, ParserRejectedMarkup

from job_tracker_ai.config import CLEAN_TEXT_MAX_CHARS, CONTENT_SELECTORS, NOISE_SELECTORS
from job_tracker_ai.schemas.page import ExtractedSignals
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def _meta_content(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    if tag is None:
        return ""
    content = tag.get("content")
    return content.strip() if isinstance(content, str) else ""


def _structured_entries(soup: BeautifulSoup) -> List[Any]:
    """Parse every JSON-LD script; malformed blocks are skipped."""
    entries: List[Any] = []
    for script in soup.find_all("script", type="application/ld+json"):
        try:
            entries.append(json.loads(script.string or ""))
        except (ValueError, TypeError, RecursionError) as e:
            logger.debug("Skipping malformed JSON-LD block: %s", e)
    return entries


def _main_text(soup: BeautifulSoup, content_selectors: Sequence[str]) -> str:
    """Text of the first matching content region, else of the whole body."""
    for selector in content_selectors:
        region = soup.select_one(selector)
        if region is not None:
            text = collapse_whitespace(region.get_text(" "))
            if text:
                return text
            break
    body = soup.body if soup.body is not None else soup
    return collapse_whitespace(body.get_text(" "))


def extract_signals(
    html: Optional[str],
    max_chars: int = CLEAN_TEXT_MAX_CHARS,
    content_selectors: Sequence[str] = CONTENT_SELECTORS,
    noise_selectors: Sequence[str] = NOISE_SELECTORS,
) -> ExtractedSignals:
    """
    Parse page HTML into ExtractedSignals. Never raises: missing pieces come back
    as empty strings. JSON-LD is read before noise elements (scripts included)
    are removed, and clean_text is capped at max_chars.
    """
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning("HTML parser rejected page markup: %s", e)
        return ExtractedSignals()

    title_tag = soup.find("title")
    title = collapse_whitespace(title_tag.get_text()) if title_tag is not None else ""
    meta_description = _meta_content(soup, 'meta[name="description"]')
    og_title = _meta_content(soup, 'meta[property="og:title"]')
    og_description = _meta_content(soup, 'meta[property="og:description"]')
    structured = _structured_entries(soup)

    if noise_selectors:
        for element in soup.select(", ".join(noise_selectors)):
            element.extract()

    clean_text = _main_text(soup, content_selectors)[:max_chars]

    return ExtractedSignals(
        title=title,
        meta_description=meta_description,
        og_title=og_title,
        og_description=og_description,
        clean_text=clean_text,
        structured_entries=structured,
    )
