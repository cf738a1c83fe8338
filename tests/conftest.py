from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import requests

from lyrics_resolver.config import AppConfig
from lyrics_resolver.query.types import CandidateQuery
from lyrics_resolver.sources.base import LyricsSource, NotFound, ProviderResult


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, *, bad_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self) -> Any:
        if self._bad_json:
            raise requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class HttpRecorder:
    """Stands in for requests.get; replies are consumed in order."""

    def __init__(self, *replies: FakeResponse | Exception):
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    def __call__(self, url: str, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class ScriptedSource(LyricsSource):
    """Source that answers from a dict keyed by (track, artist)."""

    def __init__(self, name: str, answers: dict[tuple[str, str], ProviderResult] | None = None, default=None, *, last_resort=False):
        super().__init__()
        self.name = name
        self.last_resort = last_resort
        self.answers = answers or {}
        self.default = default
        self.seen: list[CandidateQuery] = []
        self.timeouts: list[float | None] = []

    def lookup(self, candidate: CandidateQuery, *, timeout_s: float | None = None) -> ProviderResult:
        self.seen.append(candidate)
        self.timeouts.append(timeout_s)
        return super().lookup(candidate, timeout_s=timeout_s)

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        answer = self.answers.get(candidate.pair, self.default)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            return NotFound()
        return answer


@pytest.fixture
def http(monkeypatch):
    def _install(*replies: FakeResponse | Exception) -> HttpRecorder:
        rec = HttpRecorder(*replies)
        monkeypatch.setattr(requests, "get", rec)
        return rec

    return _install


@pytest.fixture
def cfg(tmp_path: Path) -> AppConfig:
    return AppConfig(
        config_dir=tmp_path / "config",
        providers=("the_lyrics_api", "lyrics_ovh", "lewagon", "lyrist"),
        musixmatch_api_key=None,
        request_timeout_s=5.0,
        user_agent="test-agent",
        total_budget_s=0.0,
    )


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def scripted():
    return ScriptedSource
