"""yt_digest.errors – the transcript error taxonomy plus compatibility
wrappers around youtube-transcript-api error classes.  Modules should import
library errors from here instead of digging into private `_errors` internals.
"""
from __future__ import annotations

from importlib import import_module

_errors = import_module("youtube_transcript_api._errors")

CouldNotRetrieveTranscript = getattr(_errors, "CouldNotRetrieveTranscript")
NoTranscriptFound = getattr(_errors, "NoTranscriptFound")
TranscriptsDisabled = getattr(_errors, "TranscriptsDisabled")
VideoUnavailable = getattr(_errors, "VideoUnavailable")
InvalidVideoId = getattr(_errors, "InvalidVideoId")

# Optional classes – provide dummies if missing


class _Placeholder(Exception):
    """Stub used when the underlying library removed a class."""


VideoUnplayable = getattr(_errors, "VideoUnplayable", _Placeholder)
AgeRestricted = getattr(_errors, "AgeRestricted", _Placeholder)


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------

class DigestError(Exception):
    """Base class for all yt-digest errors."""

    default_message = "Transcript request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidUrl(DigestError):
    """No known YouTube URL shape matched the input."""

    default_message = "Invalid YouTube URL. Please provide a valid YouTube video URL."


class NoTranscript(DigestError):
    """Captions are missing or disabled for the video."""

    default_message = (
        "No transcript found for this video. "
        "Captions may be disabled or unavailable."
    )


class UnavailableVideo(DigestError):
    """Video is private, deleted or restricted."""

    default_message = "This video is unavailable (may be private, deleted, or restricted)"


class InvalidVideo(DigestError):
    """The identifier does not name a known video."""

    default_message = "Invalid video ID or video not found"


class UnknownFetchFailure(DigestError):
    """Any other retrieval failure; wraps the original message verbatim."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to fetch transcript: {detail}")


class ToolError(DigestError):
    """Dispatch-level failure carrying a protocol error code."""

    def __init__(self, code: str, message: str):
        self.code = code
        super().__init__(message)


__all__ = [
    "CouldNotRetrieveTranscript",
    "NoTranscriptFound",
    "TranscriptsDisabled",
    "VideoUnavailable",
    "InvalidVideoId",
    "VideoUnplayable",
    "AgeRestricted",
    "DigestError",
    "InvalidUrl",
    "NoTranscript",
    "UnavailableVideo",
    "InvalidVideo",
    "UnknownFetchFailure",
    "ToolError",
]
