"""
Unit tests for prompt construction and JobPosting selection.
"""
import json

from job_tracker_ai.schemas.page import ExtractedSignals
from job_tracker_ai.services.prompt_builder import (
    EXTRACTION_SYSTEM_PROMPT,
    build_prompt,
    find_job_posting,
)

URL = "https://careers.example.com/jobs/7"


def _signals(entries=None, text="We are hiring a data engineer."):
    return ExtractedSignals(
        title="Data Engineer - Example",
        meta_description="Example is hiring",
        og_title="Data Engineer",
        og_description="Join Example",
        clean_text=text,
        structured_entries=entries or [],
    )


def test_find_job_posting_first_match():
    first = {"@type": "JobPosting", "title": "First"}
    second = {"@type": "JobPosting", "title": "Second"}
    entries = [{"@type": "Organization"}, first, second]

    assert find_job_posting(entries) is first


def test_find_job_posting_type_list():
    entry = {"@type": ["Thing", "JobPosting"], "title": "Listed"}

    assert find_job_posting([{"@type": "WebPage"}, entry]) is entry


def test_find_job_posting_none():
    assert find_job_posting([]) is None
    assert find_job_posting([{"@type": "Organization"}, [1, 2], "JobPosting", None]) is None
    assert find_job_posting([{"@type": "jobposting"}]) is None


def test_content_block_order_without_structured_data():
    payload = build_prompt(URL, _signals())

    assert payload.user_content == (
        f"URL: {URL}\n"
        "Page Title: Data Engineer - Example\n"
        "Meta Description: Example is hiring\n"
        "OG Title: Data Engineer\n"
        "OG Description: Join Example\n"
        "\n"
        "Page Content:\n"
        "We are hiring a data engineer."
    )
    assert "Structured Job Data" not in payload.user_content


def test_structured_job_data_precedes_page_content():
    posting = {"@type": "JobPosting", "title": "Data Engineer", "hiringOrganization": {"name": "Example"}}
    payload = build_prompt(URL, _signals(entries=[{"@type": "Organization"}, posting]))

    content = payload.user_content
    structured_at = content.index("Structured Job Data:")
    page_at = content.index("Page Content:")
    assert content.index("OG Description:") < structured_at < page_at
    assert json.dumps(posting, indent=2) in content
    assert '"Organization"' not in content


def test_system_prompt_contract():
    payload = build_prompt(URL, _signals())

    assert payload.system_prompt == EXTRACTION_SYSTEM_PROMPT
    for key in ("company", "position", "location", "salary", "notes"):
        assert f'"{key}"' in payload.system_prompt
    assert "null" in payload.system_prompt
    assert "Remote" in payload.system_prompt
    assert "150 characters" in payload.system_prompt


def test_build_prompt_is_deterministic():
    signals = _signals(entries=[{"@type": "JobPosting", "title": "X"}])

    assert build_prompt(URL, signals) == build_prompt(URL, signals)
