from __future__ import annotations

import re

_BRACKETED_RE = re.compile(r"\s*\([^)]*\)|\s*\[[^\]]*\]")
_MARKER_RE = re.compile(
    r"\s*\b(?:official\s*video|official\s*audio|music\s*video|hd|mv)\b",
    re.IGNORECASE,
)
_SPACES_RE = re.compile(r"\s{2,}")

# [ft.|feat.|featuring] and everything after it; "&" only with something after it
_FEATURING_RE = re.compile(r"\s*(?:\b(?:ft|feat)\b\.?.*|\bfeaturing\b.*|&.+)$", re.IGNORECASE | re.DOTALL)


def _clean_once(s: str) -> str:
    s = _BRACKETED_RE.sub("", s)
    s = _MARKER_RE.sub("", s)
    s = _SPACES_RE.sub(" ", s)
    return s.strip()


def normalize(raw: str) -> str:
    """
    Strip annotation noise from a track or artist name.

    Removes "(...)" and "[...]" groups and the markers Official Video,
    Official Audio, Music Video, HD and MV (any case, whole words only).
    Runs until nothing changes, so normalize(normalize(x)) == normalize(x).

    May return "" when the input was all noise; callers that need a
    non-empty value fall back to the raw string themselves.
    """
    out = raw
    while True:
        cleaned = _clean_once(out)
        if cleaned == out:
            return cleaned
        out = cleaned


def main_title(normalized: str) -> str:
    """Cut a featured-artist suffix ("Song ft. X" -> "Song")."""
    head = _FEATURING_RE.sub("", normalized).strip()
    return head or normalized
