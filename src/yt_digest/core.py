"""yt_digest.core – caption retrieval and failure classification.

``fetch_captions`` is the thin collaborator around youtube-transcript-api;
``retrieve_cues`` wraps any such collaborator with the output guard, error
classification and cue normalisation.  Rendering lives in other modules to
keep responsibilities clear.
"""

from __future__ import annotations

import io
import logging
import threading
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from typing import Any, Callable, Iterator

import requests
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig, WebshareProxyConfig

from .constants import DEFAULT_LANGUAGE
from .cues import Cue, normalize_cues
from .errors import (
    AgeRestricted,
    CouldNotRetrieveTranscript,
    DigestError,
    InvalidVideo,
    InvalidVideoId,
    NoTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    UnavailableVideo,
    UnknownFetchFailure,
    VideoUnavailable,
    VideoUnplayable,
)
from .user_agent import _pick_ua

__all__ = [
    "Fetcher",
    "quiet_output",
    "classify_failure",
    "fetch_captions",
    "retrieve_cues",
]

log = logging.getLogger(__name__)

# (video_id, language) -> raw caption records
Fetcher = Callable[[str, str], Any]

# ---------------------------------------------------------------------------
# Output guard
# ---------------------------------------------------------------------------

# sys.stdout/sys.stderr are process-wide; overlapping requests take turns.
_OUTPUT_LOCK = threading.RLock()


@contextmanager
def quiet_output(logger: logging.Logger | None = None) -> Iterator[io.StringIO]:
    """Capture stray stdout/stderr writes for the duration of the block.

    Anything captured is forwarded to *logger* at DEBUG once the streams are
    restored, on success and on error alike.
    """
    logger = logger or log
    buf = io.StringIO()
    with _OUTPUT_LOCK:
        try:
            with redirect_stdout(buf), redirect_stderr(buf):
                yield buf
        finally:
            noise = buf.getvalue().strip()
            if noise:
                logger.debug("Suppressed collaborator output: %s", noise)


# ---------------------------------------------------------------------------
# Failure classification
# ---------------------------------------------------------------------------

_NO_TRANSCRIPT_PHRASES = ("could not find captions", "No captions found", "transcript not available")
_UNAVAILABLE_PHRASES = ("Video unavailable", "private", "does not exist")
_INVALID_PHRASES = ("invalid", "not found")


def classify_failure(failure: object) -> DigestError:
    """Map a collaborator failure onto the transcript error taxonomy.

    Typed youtube-transcript-api errors are mapped by class.  Anything else
    falls back to matching phrases in its message.
    """
    if isinstance(failure, DigestError):
        return failure
    if isinstance(failure, (TranscriptsDisabled, NoTranscriptFound)):
        return NoTranscript()
    if isinstance(failure, InvalidVideoId):
        return InvalidVideo()
    if isinstance(failure, (VideoUnavailable, VideoUnplayable, AgeRestricted)):
        return UnavailableVideo()

    message = str(failure)
    if isinstance(failure, CouldNotRetrieveTranscript):
        return UnknownFetchFailure(message)
    if any(p in message for p in _NO_TRANSCRIPT_PHRASES):
        return NoTranscript()
    if any(p in message for p in _UNAVAILABLE_PHRASES):
        return UnavailableVideo()
    if any(p in message for p in _INVALID_PHRASES):
        return InvalidVideo()
    return UnknownFetchFailure(message)


# ---------------------------------------------------------------------------
# Retrieval
# ---------------------------------------------------------------------------

def fetch_captions(
    video_id: str,
    language: str = DEFAULT_LANGUAGE,
    *,
    cookies: list | None = None,
    proxy_cfg: GenericProxyConfig | WebshareProxyConfig | None = None,
    api: YouTubeTranscriptApi | None = None,
):
    """Fetch raw caption snippets for *video_id* in *language*.

    One attempt, no retries; library errors propagate untouched.
    """
    if api is None:
        session = requests.Session()
        session.headers.update({"User-Agent": _pick_ua()})
        if cookies:
            for c in cookies:
                session.cookies.set(c.get("name"), c.get("value"))
        api = YouTubeTranscriptApi(proxy_config=proxy_cfg, http_client=session)

    label = "direct"
    if isinstance(proxy_cfg, GenericProxyConfig):
        label = proxy_cfg.http_url
    elif isinstance(proxy_cfg, WebshareProxyConfig):
        label = "webshare"
    log.info("Fetching %s captions for %s via %s", language, video_id, label)
    return api.fetch(video_id, languages=[language])


def retrieve_cues(
    video_id: str,
    language: str = DEFAULT_LANGUAGE,
    *,
    fetch: Fetcher | None = None,
    logger: logging.Logger | None = None,
) -> list[Cue]:
    """Run *fetch* under the output guard and return normalised cues.

    Raises a :class:`~yt_digest.errors.DigestError` subclass on any failure,
    including an empty caption list.
    """
    logger = logger or log
    fetch = fetch or fetch_captions
    try:
        with quiet_output(logger):
            raw = fetch(video_id, language)
    except Exception as exc:
        err = classify_failure(exc)
        logger.warning("✖ %s (%s): %s", video_id, exc.__class__.__name__, err)
        raise err from exc

    if not raw:
        logger.warning("✖ no transcript for %s", video_id)
        raise NoTranscript()

    cues = normalize_cues(raw)
    logger.info("✔ %d cues for %s", len(cues), video_id)
    return cues
