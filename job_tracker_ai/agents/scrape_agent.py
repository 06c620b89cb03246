"""Scrape Agent: fetch a job posting, extract signals, ask the LLM, validate the answer."""

from typing import Optional

import httpx
from openai import AsyncOpenAI

from job_tracker_ai.schemas.extraction import ExtractionResult
from job_tracker_ai.services.html_extractor import extract_signals
from job_tracker_ai.services.inference_client import complete_chat
from job_tracker_ai.services.page_fetcher import fetch_page
from job_tracker_ai.services.prompt_builder import build_prompt
from job_tracker_ai.services.response_validator import validate_response
from job_tracker_ai.utils.helpers import validate_job_url
from job_tracker_ai.utils.logger import get_logger

logger = get_logger(__name__)


async def run_scrape_agent(
    url: str,
    client: Optional[AsyncOpenAI] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ExtractionResult:
    """
    Run the Scrape Agent for one URL: fetch (with retry), extract page signals,
    build the prompt, call the LLM once and validate its JSON.
    Any stage failure propagates; there is no partial result.
    """
    url = validate_job_url(url)
    logger.info("Scraping job data from: %s", url)

    page = await fetch_page(url, transport=transport)
    signals = extract_signals(page.text)
    logger.info(
        "Extracted signals for %s: title=%r text_chars=%s json_ld_blocks=%s",
        url,
        signals.title[:80],
        len(signals.clean_text),
        len(signals.structured_entries),
    )

    payload = build_prompt(url, signals)
    raw_text = await complete_chat(payload, client=client)
    result = validate_response(raw_text)
    logger.info("Scrape Agent finished: url=%s company=%s position=%s", url, result.company, result.position)
    return result
