"""yt_digest.formatters – render normalised cues into text artifacts.

The renderers plug into youtube-transcript-api's ``Formatter`` interface so
they can be swapped with the library's own formatters where cue objects are
compatible.
"""
from __future__ import annotations

from typing import Iterable

from youtube_transcript_api import formatters as yt_fmt

from .constants import FORMATS, SECTION_WINDOW_SECONDS, SENTENCES_PER_PARAGRAPH
from .cues import Cue, transcript_stats
from .grouping import group_into_sections, split_into_paragraphs
from .header import _info_text, _transcript_header
from .utils import format_timestamp

__all__ = [
    "PlainText",
    "StructuredText",
    "FMT",
    "render_transcript",
    "render_info",
]


class PlainText(yt_fmt.Formatter):
    """Flat, single-line text that can prefix timestamps."""

    def __init__(self, show: bool = False):
        self.show = show

    def format_transcript(self, transcript: Iterable[Cue], **kw) -> str:  # type: ignore[override]
        if not self.show:
            return " ".join(c.text for c in transcript)
        return " ".join(
            f"[{format_timestamp(c.offset_ms / 1000)}] {c.text}" for c in transcript
        )

    def format_transcripts(self, transcripts, **kw) -> str:  # type: ignore[override]
        return "\n\n".join(self.format_transcript(t, **kw) for t in transcripts)


class StructuredText(yt_fmt.Formatter):
    """Markdown document: header block plus sections (timestamps) or paragraphs."""

    def __init__(
        self,
        show: bool = False,
        window_seconds: float = SECTION_WINDOW_SECONDS,
        sentences_per_paragraph: int = SENTENCES_PER_PARAGRAPH,
    ):
        self.show = show
        self.window_seconds = window_seconds
        self.sentences_per_paragraph = sentences_per_paragraph

    def format_transcript(self, transcript: Iterable[Cue], url: str = "", **kw) -> str:  # type: ignore[override]
        cues = list(transcript)
        parts = [_transcript_header(url, transcript_stats(cues))]

        if self.show:
            for idx, sec in enumerate(group_into_sections(cues, self.window_seconds), 1):
                start = format_timestamp(sec.start_ms / 1000)
                end = format_timestamp(sec.end_ms / 1000)
                parts.append(f"### Section {idx} ({start} - {end})\n\n{sec.text}\n\n")
        else:
            paragraphs = split_into_paragraphs(cues, self.sentences_per_paragraph)
            for idx, para in enumerate(paragraphs, 1):
                parts.append(f"**Segment {idx}:**\n{para}\n\n")

        return "".join(parts)

    def format_transcripts(self, transcripts, **kw) -> str:  # type: ignore[override]
        return "\n".join(self.format_transcript(t, **kw) for t in transcripts)


FMT = {
    ("plain", False): PlainText(),
    ("plain", True): PlainText(show=True),
    ("structured", False): StructuredText(),
    ("structured", True): StructuredText(show=True),
}


def render_transcript(
    cues: list[Cue],
    url: str,
    *,
    include_timestamps: bool = False,
    fmt: str = "structured",
) -> str:
    """Render *cues* in one of the four transcript shapes."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")
    return FMT[(fmt, bool(include_timestamps))].format_transcript(cues, url=url)


def render_info(video_id: str, url: str, cues: list[Cue]) -> str:
    """Render the video information summary for *cues*."""
    return _info_text(video_id, url, transcript_stats(cues), available=bool(cues))
