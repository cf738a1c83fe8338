from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawQuery:
    track: str
    artist: str

    @property
    def display(self) -> str:
        if self.artist and self.track:
            return f"{self.artist} - {self.track}"
        return self.track or self.artist or "Unknown track"


@dataclass(frozen=True, slots=True)
class CandidateQuery:
    track: str
    artist: str
    rank: int = 0

    @property
    def pair(self) -> tuple[str, str]:
        return (self.track, self.artist)

    @property
    def display(self) -> str:
        return f'"{self.artist}" - "{self.track}"'


@dataclass(frozen=True, slots=True)
class QueryVariants:
    """The three query shapes reported back when nothing was found."""
    original: RawQuery
    cleaned: RawQuery
    main_track: RawQuery

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            "original": {"track": self.original.track, "artist": self.original.artist},
            "cleaned": {"track": self.cleaned.track, "artist": self.cleaned.artist},
            "mainTrack": {"track": self.main_track.track, "artist": self.main_track.artist},
        }
