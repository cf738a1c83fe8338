from __future__ import annotations

from .normalize import main_title, normalize
from .types import CandidateQuery, QueryVariants, RawQuery


def _cleaned(raw: str) -> str:
    # cleaning may eat the whole value ("(Official Video)"); never hand out ""
    return normalize(raw) or raw.strip()


def _main(raw: str) -> str:
    return main_title(_cleaned(raw))


def reduced_query(raw_track: str, raw_artist: str) -> CandidateQuery:
    """Most aggressively cleaned pair: main title + cleaned artist."""
    return CandidateQuery(track=_main(raw_track), artist=_cleaned(raw_artist), rank=1)


def variants(raw_track: str, raw_artist: str) -> QueryVariants:
    cleaned_artist = _cleaned(raw_artist)
    return QueryVariants(
        original=RawQuery(track=raw_track, artist=raw_artist),
        cleaned=RawQuery(track=_cleaned(raw_track), artist=cleaned_artist),
        main_track=RawQuery(track=_main(raw_track), artist=cleaned_artist),
    )


def generate(raw_track: str, raw_artist: str) -> list[CandidateQuery]:
    """
    Ordered query variations to try, best first:

    1. main title,    cleaned artist
    2. cleaned title, cleaned artist
    3. raw title,     raw artist
    4. main title,    raw artist

    `rank` is the slot number above. Duplicate (track, artist) pairs keep
    their first slot. The raw pair is always in the result, so the list is
    never empty.
    """
    cleaned_track = _cleaned(raw_track)
    cleaned_artist = _cleaned(raw_artist)
    main_track = main_title(cleaned_track)

    ordered = [
        (main_track, cleaned_artist),
        (cleaned_track, cleaned_artist),
        (raw_track, raw_artist),
        (main_track, raw_artist),
    ]

    out: list[CandidateQuery] = []
    seen: set[tuple[str, str]] = set()
    for rank, (track, artist) in enumerate(ordered, 1):
        if (track, artist) in seen:
            continue
        seen.add((track, artist))
        out.append(CandidateQuery(track=track, artist=artist, rank=rank))
    return out
