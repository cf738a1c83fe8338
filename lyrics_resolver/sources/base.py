from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

import requests

from lyrics_resolver.query.types import CandidateQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Found:
    lyrics: str
    copyright: str
    matched_track: str
    matched_artist: str


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class ProviderError:
    reason: str


ProviderResult = Union[Found, NotFound, ProviderError]


class LyricsSource:
    """
    One external lyrics service.

    Subclasses implement `_fetch`, which may raise freely; `lookup` turns
    every failure into a ProviderError so nothing escapes into the cascade.
    A source is a single attempt per candidate: no retries, no state kept
    between calls.
    """

    name: str
    # called once with the reduced query instead of every candidate
    last_resort: bool = False
    # provider-specific "we have nothing" texts served with a 200
    not_found_markers: tuple[str, ...] = ()

    def __init__(self, *, timeout_s: float = 10.0, user_agent: str = "Mozilla/5.0"):
        self.timeout_s = timeout_s
        self.user_agent = user_agent

    def lookup(self, candidate: CandidateQuery, *, timeout_s: float | None = None) -> ProviderResult:
        timeout = self.timeout_s if timeout_s is None else min(timeout_s, self.timeout_s)
        try:
            return self._fetch(candidate, timeout)
        except requests.RequestException as e:
            logger.warning("%s request failed: %s", self.name, e)
            return ProviderError(reason=f"request failed: {e}")
        except ValueError as e:
            # includes JSON decode errors
            logger.warning("%s returned a malformed payload: %s", self.name, e)
            return ProviderError(reason=f"malformed payload: {e}")
        except Exception as e:
            logger.exception("%s lookup crashed", self.name)
            return ProviderError(reason=f"{type(e).__name__}: {e}")

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        raise NotImplementedError

    def _get_json(
        self, url: str, *, params: dict[str, str] | None = None, timeout: float
    ) -> dict[str, Any]:
        """GET a JSON object. Any non-2xx status raises, 404 included."""
        r = requests.get(url, params=params, headers={"User-Agent": self.user_agent}, timeout=timeout)
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _accept(
        self,
        lyrics: Any,
        *,
        candidate: CandidateQuery,
        copyright: Any = "",
        matched_track: str | None = None,
        matched_artist: str | None = None,
    ) -> ProviderResult:
        if not isinstance(lyrics, str) or not lyrics.strip():
            return NotFound()
        if any(marker in lyrics for marker in self.not_found_markers):
            return NotFound()
        return Found(
            lyrics=lyrics,
            copyright=copyright if isinstance(copyright, str) else "",
            matched_track=matched_track or candidate.track,
            matched_artist=matched_artist or candidate.artist,
        )
