from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Union

from lyrics_resolver.config import AppConfig
from lyrics_resolver.errors import ValidationError
from lyrics_resolver.query.candidates import generate, reduced_query, variants
from lyrics_resolver.query.types import CandidateQuery, QueryVariants

from .base import Found, LyricsSource, ProviderResult
from .lewagon import LeWagonSource
from .lyrics_ovh import LyricsOvhSource
from .lyrist import LyristSource
from .musixmatch import MusixmatchSource
from .the_lyrics_api import TheLyricsApiSource

logger = logging.getLogger(__name__)

_ALIASES = {
    "the_lyrics_api": "the_lyrics_api",
    "thelyricsapi": "the_lyrics_api",
    "lyrics_ovh": "lyrics_ovh",
    "lyrics.ovh": "lyrics_ovh",
    "ovh": "lyrics_ovh",
    "lewagon": "lewagon",
    "le_wagon": "lewagon",
    "lyrist": "lyrist",
    "musixmatch": "musixmatch",
    "mxm": "musixmatch",
}


@dataclass(frozen=True, slots=True)
class Attempt:
    provider: str
    candidate: CandidateQuery
    result: ProviderResult


@dataclass(frozen=True, slots=True)
class Success:
    lyrics: str
    copyright: str
    matched_track: str
    matched_artist: str
    provider_used: str
    attempts: tuple[Attempt, ...] = ()


@dataclass(frozen=True, slots=True)
class Failure:
    attempts: tuple[Attempt, ...]
    variants: QueryVariants
    budget_exhausted: bool = False


ResolutionOutcome = Union[Success, Failure]


def build_sources(cfg: AppConfig) -> list[LyricsSource]:
    out: list[LyricsSource] = []
    seen: set[str] = set()
    for s in cfg.providers:
        name = _ALIASES.get(s.strip().lower())
        if name is None:
            logger.info("Unknown provider '%s' in config, skipping", s)
            continue
        if name in seen:
            continue
        seen.add(name)

        common = {"timeout_s": cfg.request_timeout_s, "user_agent": cfg.user_agent}
        if name == "the_lyrics_api":
            out.append(TheLyricsApiSource(**common))
        elif name == "lyrics_ovh":
            out.append(LyricsOvhSource(**common))
        elif name == "lewagon":
            out.append(LeWagonSource(**common))
        elif name == "lyrist":
            out.append(LyristSource(**common))
        elif name == "musixmatch":
            if not cfg.musixmatch_api_key:
                logger.info("musixmatch listed but MUSIXMATCH_API_KEY is not set, skipping")
                continue
            out.append(MusixmatchSource(api_key=cfg.musixmatch_api_key, **common))
    return out


class LyricsService:
    """
    Provider-major cascade: every candidate against the first provider, then
    every candidate against the next one, stopping at the first hit.

    Holds only the configured source list; each resolve() call keeps its own
    trace, so one service can serve concurrent callers.
    """

    def __init__(self, cfg: AppConfig, sources: list[LyricsSource] | None = None):
        self.cfg = cfg
        self.sources = list(sources) if sources is not None else build_sources(cfg)

    def resolve(self, track: str, artist: str) -> ResolutionOutcome:
        if not track or not track.strip() or not artist or not artist.strip():
            raise ValidationError("Track name and artist name are required")

        candidates = generate(track, artist)
        last_resort_query = reduced_query(track, artist)
        budget = self.cfg.total_budget_s
        deadline = time.monotonic() + budget if budget > 0 else None
        attempts: list[Attempt] = []

        for src in self.sources:
            queue = [last_resort_query] if src.last_resort else candidates
            for candidate in queue:
                timeout_s = None
                if deadline is not None:
                    timeout_s = deadline - time.monotonic()
                    if timeout_s <= 0:
                        logger.warning(
                            "Cascade budget of %.1fs spent after %d attempts for %r - %r",
                            budget,
                            len(attempts),
                            artist,
                            track,
                        )
                        return Failure(tuple(attempts), variants(track, artist), budget_exhausted=True)

                logger.info("Trying %s: %s", src.name, candidate.display)
                result = src.lookup(candidate, timeout_s=timeout_s)
                attempts.append(Attempt(provider=src.name, candidate=candidate, result=result))

                if isinstance(result, Found):
                    logger.info("Found lyrics via %s: %s", src.name, candidate.display)
                    return Success(
                        lyrics=result.lyrics,
                        copyright=result.copyright,
                        matched_track=result.matched_track,
                        matched_artist=result.matched_artist,
                        provider_used=src.name,
                        attempts=tuple(attempts),
                    )

        logger.info("All %d attempts failed for: %r - %r", len(attempts), artist, track)
        return Failure(tuple(attempts), variants(track, artist))
