from __future__ import annotations

import logging
from typing import Any

from lyrics_resolver.query.types import CandidateQuery

from .base import LyricsSource, NotFound, ProviderError, ProviderResult

logger = logging.getLogger(__name__)


def _body(data: dict[str, Any]) -> tuple[int | None, str, dict[str, Any]]:
    """Unwrap Musixmatch's {"message": {"header": ..., "body": ...}} envelope."""
    message = data.get("message") or {}
    header = message.get("header") or {}
    body = message.get("body")
    return header.get("status_code"), header.get("hint") or "Unknown error", body if isinstance(body, dict) else {}


class MusixmatchSource(LyricsSource):
    """
    Official API, key required and rate limited. One lookup is two requests:
    track.search for the best-rated hit with lyrics, then track.lyrics.get.
    """

    name = "musixmatch"
    base_url = "https://api.musixmatch.com/ws/1.1"

    def __init__(self, *, api_key: str, timeout_s: float = 10.0, user_agent: str = "Mozilla/5.0"):
        super().__init__(timeout_s=timeout_s, user_agent=user_agent)
        self.api_key = api_key

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        search = self._get_json(
            f"{self.base_url}/track.search",
            params={
                "apikey": self.api_key,
                "q_track": candidate.track,
                "q_artist": candidate.artist,
                "page_size": "1",
                "page": "1",
                "s_track_rating": "desc",
                "f_has_lyrics": "1",
            },
            timeout=timeout,
        )
        status, hint, body = _body(search)
        if status == 404:
            return NotFound()
        if status != 200:
            return ProviderError(reason=f"track.search status {status}: {hint}")

        track_list = body.get("track_list") or []
        if not track_list:
            return NotFound()
        track = track_list[0].get("track") or {}
        track_id = track.get("track_id")
        if track_id is None:
            raise ValueError("track.search hit without track_id")

        lyrics_data = self._get_json(
            f"{self.base_url}/track.lyrics.get",
            params={"apikey": self.api_key, "track_id": str(track_id)},
            timeout=timeout,
        )
        status, hint, body = _body(lyrics_data)
        if status == 404:
            return NotFound()
        if status != 200:
            return ProviderError(reason=f"track.lyrics.get status {status}: {hint}")

        lyrics = body.get("lyrics") or {}
        logger.debug("musixmatch matched track_id=%s for %s", track_id, candidate.display)
        return self._accept(
            lyrics.get("lyrics_body"),
            candidate=candidate,
            copyright=lyrics.get("lyrics_copyright") or "",
            matched_track=track.get("track_name"),
            matched_artist=track.get("artist_name"),
        )
