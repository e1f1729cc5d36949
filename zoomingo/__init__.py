"""Zoomingo: meeting bingo served over a small JSON API."""

__version__ = "0.1.0"
