"""Shared fixtures for Job Tracker AI tests."""
from types import SimpleNamespace

import pytest

from job_tracker_ai.services.record_store import RecordStore


class FakeCompletions:
    """Stands in for client.chat.completions; records every create() call."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.content is None:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _make_openai_client(content=None, error=None):
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def store(tmp_path):
    return RecordStore(str(tmp_path / "tracker.db"))


@pytest.fixture
def no_sleep(monkeypatch):
    """Replace the fetcher's backoff sleep; returns the list of requested delays."""
    from job_tracker_ai.services import page_fetcher

    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(page_fetcher.asyncio, "sleep", fake_sleep)
    return delays


@pytest.fixture
def make_openai_client():
    """Factory for a fake AsyncOpenAI client answering with fixed content or error."""
    return _make_openai_client
