"""Build the chat prompt for job posting extraction."""

import json
from typing import Any, Iterable, Optional

from job_tracker_ai.schemas.page import ExtractedSignals, PromptPayload

JOB_POSTING_TYPE = "JobPosting"

EXTRACTION_SYSTEM_PROMPT = """You are a professional job posting analyzer.
Extract job information from the web page content below.
Return only valid JSON with exactly this structure (no markdown, no code block, no additional text):
{
  "company": "Company name",
  "position": "Job title/position",
  "location": "Location (city, state/country or 'Remote')",
  "salary": "Salary range or compensation info",
  "notes": "Brief summary of key requirements, skills, or benefits"
}
Rules:
- If a field cannot be determined, use null for that field.
- For location: prefer "City, State" format, or "Remote" for remote work.
- For salary: include currency and range if available (e.g. "$80,000 - $100,000").
- For notes: summarize key requirements, skills, or benefits in 150 characters max.
- If structured job data is provided, prioritize it over the page content."""


def find_job_posting(entries: Iterable[Any]) -> Optional[dict]:
    """First entry whose @type is JobPosting, or a list containing it."""
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        entry_type = entry.get("@type")
        if entry_type == JOB_POSTING_TYPE:
            return entry
        if isinstance(entry_type, list) and JOB_POSTING_TYPE in entry_type:
            return entry
    return None


def build_user_content(url: str, signals: ExtractedSignals) -> str:
    """Page signals in fixed order; structured job data goes before the page text."""
    parts = [
        f"URL: {url}",
        f"Page Title: {signals.title}",
        f"Meta Description: {signals.meta_description}",
        f"OG Title: {signals.og_title}",
        f"OG Description: {signals.og_description}",
        "",
    ]
    job_posting = find_job_posting(signals.structured_entries)
    if job_posting is not None:
        parts.append("Structured Job Data:")
        parts.append(json.dumps(job_posting, indent=2, ensure_ascii=False))
        parts.append("")
    parts.append("Page Content:")
    parts.append(signals.clean_text)
    return "\n".join(parts).strip()


def build_prompt(url: str, signals: ExtractedSignals) -> PromptPayload:
    return PromptPayload(
        system_prompt=EXTRACTION_SYSTEM_PROMPT,
        user_content=build_user_content(url, signals),
    )
