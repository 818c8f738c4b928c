"""yt_digest.utils

Small string helpers shared by the renderer and the fetch layer.  Keeping
these generic (no network, no YouTube client) makes them easy to unit-test
and reuse.
"""
from __future__ import annotations

import re
from urllib.parse import urlparse, urlunparse
from youtube_transcript_api.proxies import GenericProxyConfig, WebshareProxyConfig

__all__ = [
    "extract_video_id",
    "format_timestamp",
    "word_count",
    "make_proxy",
]

# ---------------------------------------------------------------------------
# YouTube URL resolver
# ---------------------------------------------------------------------------

# Order matters: the first pattern that matches wins.
_VID_PATTERNS = (
    re.compile(r"(?:https?://)?(?:www\.|m\.)?youtube\.com/watch\?v=([^&\n?#]+)"),
    re.compile(r"(?:https?://)?(?:www\.|m\.)?youtube\.com/embed/([^&\n?#]+)"),
    re.compile(r"(?:https?://)?(?:www\.|m\.)?youtube\.com/v/([^&\n?#]+)"),
    re.compile(r"(?:https?://)?(?:www\.|m\.)?youtu\.be/([^&\n?#]+)"),
)


def extract_video_id(url: str | None) -> str | None:
    """Return the video id embedded in *url*, or ``None`` if no shape matches."""
    if not url:
        return None
    for pattern in _VID_PATTERNS:
        if (m := pattern.search(url)):
            return m.group(1)
    return None


# ---------------------------------------------------------------------------
# Timestamps & word counts
# ---------------------------------------------------------------------------

def format_timestamp(seconds: float) -> str:
    """Render *seconds* as ``H:MM:SS`` (or ``M:SS`` under an hour).

    Fractions are truncated, never rounded up: ``59.9`` is ``0:59``.
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def word_count(text: str) -> int:
    """Count single-space separated tokens.

    Deliberately naive: ``"a  b"`` is three tokens and ``""`` is one.
    """
    return len(text.split(" "))


# ---------------------------------------------------------------------------
# Proxy configuration
# ---------------------------------------------------------------------------

def make_proxy(url: str) -> GenericProxyConfig | WebshareProxyConfig:
    """Return a ``GenericProxyConfig`` or ``WebshareProxyConfig`` for *url*.

    ``webshare://user:pass`` selects Webshare's rotating residential pool;
    anything else is used as a plain HTTP(S) proxy URL.
    """
    if url.lower().startswith(("ws://", "webshare://")):
        creds = url.split("://", 1)[1]
        user, pwd = creds.split(":", 1)
        return WebshareProxyConfig(user, pwd)
    parsed = urlparse(url)
    if parsed.scheme in ("http", "https"):
        http_url = urlunparse(parsed._replace(scheme="http"))
        https_url = urlunparse(parsed._replace(scheme="https"))
    else:
        http_url = https_url = url
    return GenericProxyConfig(http_url=http_url, https_url=https_url)
