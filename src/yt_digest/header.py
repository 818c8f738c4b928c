"""Header and info blocks for rendered transcripts."""

from __future__ import annotations

from .cues import TranscriptStats
from .utils import format_timestamp

__all__ = [
    "_duration_text",
    "_transcript_header",
    "_info_text",
]


def _duration_text(stats: TranscriptStats) -> str:
    """Formatted estimated duration; an empty transcript reads ``0:00``."""
    return format_timestamp((stats.duration_ms or 0) / 1000)


def _transcript_header(url: str, stats: TranscriptStats) -> str:
    """Return the Markdown block that opens every structured transcript."""
    lines = [
        "# YouTube Video Transcript",
        "",
        f"**Video URL:** {url}",
        f"**Estimated Duration:** {_duration_text(stats)}",
        f"**Transcript Segments:** {stats.segments}",
        "",
        "## Transcript Content",
        "",
    ]
    return "\n".join(lines) + "\n"


def _info_text(
    video_id: str,
    url: str,
    stats: TranscriptStats,
    available: bool = True,
) -> str:
    """Return the fixed-field video information block."""
    lines = [
        "# YouTube Video Information",
        "",
        f"**Video ID:** {video_id}",
        f"**URL:** {url}",
        f"**Estimated Duration:** {_duration_text(stats)}",
        f"**Transcript Segments:** {stats.segments}",
        f"**Estimated Word Count:** {stats.words}",
        f"**Transcript Available:** {'Yes' if available else 'No'}",
        "",
    ]
    if available:
        lines.append("This video has an available transcript and can be summarized.")
    else:
        lines.append("This video has no transcript to summarize.")
    return "\n".join(lines)
