"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# LLM call settings (near-deterministic, bounded output)
LLM_TEMPERATURE: float = 0.1
LLM_MAX_TOKENS: int = 600

# HTTP / fetch settings
HTTP_TIMEOUT_SECONDS: float = 30.0
FETCH_MAX_ATTEMPTS: int = 3
FETCH_BACKOFF_SECONDS: float = 1.0  # wait attempt * step between attempts

# Browser-like headers; many job boards reject obvious bots
FETCH_HEADERS: dict = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

# Logging level for the job_tracker_ai package logger
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Page text extraction
CLEAN_TEXT_MAX_CHARS: int = 10000

# Removed before text extraction
NOISE_SELECTORS: list = [
    "script",
    "style",
    "nav",
    "footer",
    "header",
    "aside",
    ".nav",
    ".footer",
    ".header",
    ".sidebar",
    ".advertisement",
    ".ads",
]

# Ordered by priority: the first selector with a match wins
CONTENT_SELECTORS: list = [
    "main",
    '[role="main"]',
    ".job-description",
    ".job-details",
    ".job-content",
    ".job-posting",
    ".position-description",
    ".job-summary",
    ".content",
    ".main-content",
    "article",
    ".post-content",
]

# Record store
DATABASE_PATH: str = os.getenv("TRACKER_DB_PATH", "job_tracker.db")

# Identity: header carrying the authenticated user's external id
AUTH_HEADER: str = os.getenv("TRACKER_AUTH_HEADER", "X-User-Id")
# Streamlit UI runs as a single local user
DEFAULT_USER_ID: str = os.getenv("TRACKER_USER_ID", "local-user")

# Application statuses with display labels (order used by UI and dashboard)
APPLICATION_STATUSES: dict = {
    "APPLIED": "Applied",
    "INTERVIEWING": "Interviewing",
    "OFFERED": "Offered",
    "REJECTED": "Rejected",
    "WITHDRAWN": "Withdrawn",
    "ACCEPTED": "Accepted",
}
