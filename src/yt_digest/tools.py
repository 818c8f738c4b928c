"""yt_digest.tools – the two transcript tools and their dispatcher.

A transport (MCP server, HTTP handler, CLI …) hands ``call_tool`` a tool
name plus parsed arguments and gets back a text result, or a
:class:`~yt_digest.errors.ToolError`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from .constants import DEFAULT_FORMAT, DEFAULT_LANGUAGE, FORMATS
from .core import Fetcher, retrieve_cues
from .errors import InvalidUrl, ToolError
from .formatters import render_info, render_transcript
from .utils import extract_video_id

__all__ = [
    "TOOLS",
    "METHOD_NOT_FOUND",
    "INTERNAL_ERROR",
    "get_transcript",
    "get_video_info",
    "call_tool",
]

log = logging.getLogger(__name__)

METHOD_NOT_FOUND = "MethodNotFound"
INTERNAL_ERROR = "InternalError"

TOOLS: list[dict[str, Any]] = [
    {
        "name": "get_youtube_transcript",
        "description": "Extract transcript from a YouTube video for summarization and analysis",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "YouTube video URL"},
                "include_timestamps": {
                    "type": "boolean",
                    "description": "Whether to include timestamps with the transcript",
                    "default": False,
                },
                "format": {
                    "type": "string",
                    "enum": list(FORMATS),
                    "description": "Format of the returned transcript",
                    "default": DEFAULT_FORMAT,
                },
                "language": {
                    "type": "string",
                    "description": "Language code for transcript (e.g., 'en', 'es', 'fr')",
                    "default": DEFAULT_LANGUAGE,
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "get_youtube_video_info",
        "description": "Get basic information about a YouTube video (title, duration estimate from transcript)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "YouTube video URL"},
            },
            "required": ["url"],
        },
    },
]


def _resolve(url: str | None) -> str:
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidUrl()
    return video_id


def get_transcript(
    url: str,
    *,
    language: str = DEFAULT_LANGUAGE,
    include_timestamps: bool = False,
    fmt: str = DEFAULT_FORMAT,
    fetch: Fetcher | None = None,
) -> str:
    """Fetch captions for *url* and render them in the requested shape."""
    video_id = _resolve(url)
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")
    cues = retrieve_cues(video_id, language, fetch=fetch)
    return render_transcript(cues, url, include_timestamps=include_timestamps, fmt=fmt)


def get_video_info(url: str, *, fetch: Fetcher | None = None) -> str:
    """Fetch English captions for *url* and summarise them."""
    video_id = _resolve(url)
    cues = retrieve_cues(video_id, DEFAULT_LANGUAGE, fetch=fetch)
    return render_info(video_id, url, cues)


def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None = None,
    *,
    fetch: Fetcher | None = None,
) -> dict[str, Any]:
    """Dispatch a tool call and wrap the text in a tool result."""
    args = dict(arguments or {})
    try:
        if name == "get_youtube_transcript":
            text = get_transcript(
                args.get("url"),
                language=args.get("language", DEFAULT_LANGUAGE),
                include_timestamps=bool(args.get("include_timestamps", False)),
                fmt=args.get("format", DEFAULT_FORMAT),
                fetch=fetch,
            )
        elif name == "get_youtube_video_info":
            text = get_video_info(args.get("url"), fetch=fetch)
        else:
            raise ToolError(METHOD_NOT_FOUND, f"Unknown tool: {name}")
    except ToolError:
        raise
    except Exception as exc:
        log.debug("Tool %s failed", name, exc_info=True)
        raise ToolError(INTERNAL_ERROR, f"Failed to execute {name}: {exc}") from exc

    return {"content": [{"type": "text", "text": text}]}
