"""Top-level package for yt_digest."""

from __future__ import annotations

from .constants import SERVER_VERSION as __version__
from .utils import extract_video_id, format_timestamp, word_count, make_proxy
from .cues import Cue, TranscriptStats, normalize_cue, normalize_cues, transcript_stats
from .grouping import Section, group_into_sections, split_into_paragraphs
from .formatters import PlainText, StructuredText, FMT, render_transcript, render_info
from .converter import extract_cues, load_cues
from .errors import (
    DigestError,
    InvalidUrl,
    NoTranscript,
    UnavailableVideo,
    InvalidVideo,
    UnknownFetchFailure,
    ToolError,
)
from .core import quiet_output, classify_failure, fetch_captions, retrieve_cues
from .tools import TOOLS, call_tool, get_transcript, get_video_info
from .cli import main

__all__ = [
    "__version__",
    "extract_video_id",
    "format_timestamp",
    "word_count",
    "make_proxy",
    "Cue",
    "TranscriptStats",
    "normalize_cue",
    "normalize_cues",
    "transcript_stats",
    "Section",
    "group_into_sections",
    "split_into_paragraphs",
    "PlainText",
    "StructuredText",
    "FMT",
    "render_transcript",
    "render_info",
    "extract_cues",
    "load_cues",
    "DigestError",
    "InvalidUrl",
    "NoTranscript",
    "UnavailableVideo",
    "InvalidVideo",
    "UnknownFetchFailure",
    "ToolError",
    "quiet_output",
    "classify_failure",
    "fetch_captions",
    "retrieve_cues",
    "TOOLS",
    "call_tool",
    "get_transcript",
    "get_video_info",
    "main",
]
