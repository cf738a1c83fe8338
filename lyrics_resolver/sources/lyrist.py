from __future__ import annotations

import requests

from lyrics_resolver.query.types import CandidateQuery

from .base import LyricsSource, ProviderResult


class LyristSource(LyricsSource):
    """
    Loose full-text matcher. It finds *something* for most queries, which
    is why it runs last and only once, with the reduced query.
    """

    name = "lyrist"
    base_url = "https://lyrist.vercel.app/api"
    last_resort = True

    def _fetch(self, candidate: CandidateQuery, timeout: float) -> ProviderResult:
        url = f"{self.base_url}/{requests.utils.quote(candidate.track, safe='')}"
        data = self._get_json(url, params={"q": candidate.artist}, timeout=timeout)
        return self._accept(data.get("lyrics"), candidate=candidate)
