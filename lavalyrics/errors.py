"""Errors raised by the LavaLyrics API client."""

from __future__ import annotations


class LavaLyricsError(Exception):
    """Base class for all LavaLyrics client errors."""


class ApiError(LavaLyricsError):
    """The LavaLyrics API answered with a non-2xx status."""

    def __init__(self, status: int, status_text: str, message: str | None = None) -> None:
        """Initialize the error from the HTTP status line."""
        self.status = status
        self.status_text = status_text
        self.message = message or f"API request failed: {status} {status_text}"
        super().__init__(status, status_text, self.message)

    def __str__(self) -> str:
        """Return the message."""
        return self.message

    def __repr__(self) -> str:
        """Return the representation."""
        return f"ApiError(status={self.status!r}, status_text={self.status_text!r})"
