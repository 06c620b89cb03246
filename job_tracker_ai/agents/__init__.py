"""Agent exports."""

from .scrape_agent import run_scrape_agent

__all__ = ["run_scrape_agent"]
