from __future__ import annotations

import requests

from lyrics_resolver.query.types import CandidateQuery

from .base import LyricsSource, ProviderResult


class LyricsOvhSource(LyricsSource):
    name = "lyrics_ovh"
    base_url = "https://api.lyrics.ovh/v1"
    not_found_markers = ("Unfortunately, we don't have the lyrics",)

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        url = (
            f"{self.base_url}/{requests.utils.quote(candidate.artist, safe='')}"
            f"/{requests.utils.quote(candidate.track, safe='')}"
        )
        data = self._get_json(url, timeout=timeout)
        # English-focused; the only source here that reports a copyright line
        return self._accept(data.get("lyrics"), candidate=candidate, copyright=data.get("copyright") or "")
