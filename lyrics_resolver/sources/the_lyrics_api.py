from __future__ import annotations

import requests

from lyrics_resolver.query.types import CandidateQuery

from .base import LyricsSource, ProviderResult


class TheLyricsApiSource(LyricsSource):
    """Multilingual (Hindi and English) catalogue, no rate limit."""

    name = "the_lyrics_api"
    base_url = "https://the-lyrics-api.herokuapp.com/api/lyrics"

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        url = (
            f"{self.base_url}/{requests.utils.quote(candidate.artist, safe='')}"
            f"/{requests.utils.quote(candidate.track, safe='')}"
        )
        data = self._get_json(url, timeout=timeout)
        return self._accept(data.get("lyrics"), candidate=candidate)
