from __future__ import annotations

from lyrics_resolver.query.types import CandidateQuery

from .base import LyricsSource, ProviderResult


class LeWagonSource(LyricsSource):
    name = "lewagon"
    base_url = "https://lyrics.lewagon.ai/search"

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        data = self._get_json(self.base_url, params={"q": f"{candidate.artist} {candidate.track}"}, timeout=timeout)
        return self._accept(data.get("lyrics"), candidate=candidate)
