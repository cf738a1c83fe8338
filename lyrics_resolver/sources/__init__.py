from .base import Found, LyricsSource, NotFound, ProviderError, ProviderResult
from .service import Attempt, Failure, LyricsService, ResolutionOutcome, Success, build_sources

__all__ = [
    "Attempt",
    "Failure",
    "Found",
    "LyricsService",
    "LyricsSource",
    "NotFound",
    "ProviderError",
    "ProviderResult",
    "ResolutionOutcome",
    "Success",
    "build_sources",
]
