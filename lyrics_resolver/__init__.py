"""Lyrics resolution for noisy (track, artist) pairs taken from video titles."""

__version__ = "0.1.0"
