"""Transient page data passed between scrape pipeline stages."""

from typing import Any, List

from pydantic import BaseModel, Field


class RawPage(BaseModel):
    """Fetched page content; discarded once the extractor has read it."""

    url: str = Field(..., description="Requested URL")
    final_url: str = Field(..., description="URL after following redirects")
    status_code: int = Field(..., description="Final HTTP response status")
    text: str = Field(default="", description="Decoded response body")


class ExtractedSignals(BaseModel):
    """Normalized signals read from a job posting page."""

    title: str = Field(default="", description="Text of the <title> element")
    meta_description: str = Field(default="", description="meta[name=description] content")
    og_title: str = Field(default="", description="meta[property=og:title] content")
    og_description: str = Field(default="", description="meta[property=og:description] content")
    clean_text: str = Field(default="", description="Whitespace-collapsed main content text")
    structured_entries: List[Any] = Field(
        default_factory=list, description="Parsed JSON-LD blocks, malformed ones skipped"
    )


class PromptPayload(BaseModel):
    """System instruction and user content for one chat completion."""

    system_prompt: str
    user_content: str
