"""
Video title -> (track, artist) guess.

This sits in front of the resolver. Channel-suffix cleanup ("ArtistVEVO",
"Artist Official") happens here and only here: `normalize` leaves artist
names alone apart from the generic annotation markers.
"""

from __future__ import annotations

import re

from .normalize import normalize
from .types import RawQuery

_TITLE_PATTERNS = (
    re.compile(r"^(.+?)\s+[-–—]\s+(.+)$", re.DOTALL),  # "Artist - Song"
    re.compile(r"^(.+?)\s*:\s*(.+)$", re.DOTALL),  # "Artist: Song"
    re.compile(r"^(.+?)\s*\|\s*(.+)$", re.DOTALL),  # "Artist | Song"
)
_CHANNEL_NOISE_RE = re.compile(r"\s*(?:VEVO|Official)", re.IGNORECASE)


def clean_channel(channel_title: str) -> str:
    cleaned = _CHANNEL_NOISE_RE.sub("", channel_title).strip()
    return cleaned or channel_title.strip()


def parse_video_title(title: str, channel_title: str = "") -> RawQuery:
    clean_title = normalize(title) or title.strip()

    for pattern in _TITLE_PATTERNS:
        m = pattern.match(clean_title)
        if m:
            artist = m.group(1).strip()
            track = m.group(2).strip()
            if artist and track:
                return RawQuery(track=track, artist=artist)

    return RawQuery(track=clean_title, artist=clean_channel(channel_title))
