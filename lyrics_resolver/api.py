"""
Request-shaped entry point for the web layer.

`get_lyrics` takes the two query strings a page sends and returns the
JSON body to render, or raises a ResolverError whose `status_code` and
`to_dict()` give the error response.
"""

from __future__ import annotations

from typing import Any

from lyrics_resolver.config import load_config
from lyrics_resolver.errors import NotFoundAfterExhaustion
from lyrics_resolver.sources.service import Failure, LyricsService


def get_lyrics(track: str | None, artist: str | None, *, service: LyricsService | None = None) -> dict[str, Any]:
    svc = service or LyricsService(load_config())
    outcome = svc.resolve(track or "", artist or "")
    if isinstance(outcome, Failure):
        raise NotFoundAfterExhaustion(outcome)
    return {
        "lyrics": outcome.lyrics,
        "copyright": outcome.copyright,
        "trackName": outcome.matched_track,
        "artistName": outcome.matched_artist,
        "provider": outcome.provider_used,
    }
