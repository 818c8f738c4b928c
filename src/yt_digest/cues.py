"""yt_digest.cues – canonical caption cues and the statistics derived from them.

Raw records come either from ``youtube-transcript-api`` (snippet objects with
``text``/``start``/``duration`` attributes) or from JSON on disk (mappings
with ``start`` and ``dur`` or ``duration`` in seconds, as numbers or numeric
strings).  Everything is normalised to integer milliseconds.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any, Optional

from .utils import word_count

__all__ = [
    "Cue",
    "TranscriptStats",
    "normalize_cue",
    "normalize_cues",
    "transcript_stats",
]

log = logging.getLogger(__name__)


# ----------------------------
# Data structures
# ----------------------------

@dataclass(frozen=True)
class Cue:
    text: str
    offset_ms: int
    duration_ms: int

    @property
    def end_ms(self) -> int:
        return self.offset_ms + self.duration_ms

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TranscriptStats:
    duration_ms: Optional[int]  # None for an empty transcript
    segments: int
    words: int


# ----------------------------
# Normalisation
# ----------------------------

def _field(raw: Any, *names: str) -> Any:
    for name in names:
        if isinstance(raw, Mapping):
            if raw.get(name) is not None:
                return raw[name]
        elif getattr(raw, name, None) is not None:
            return getattr(raw, name)
    return None


def _to_ms(value: Any) -> int:
    """Seconds (number or numeric string) → non-negative integer ms."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return 0
    ms = seconds * 1000
    if not math.isfinite(ms) or ms <= 0:
        return 0
    return round(ms)


def normalize_cue(raw: Any) -> Cue:
    """Convert one raw caption record into a :class:`Cue`.

    Malformed records never raise: missing numbers become ``0`` and missing
    text becomes ``""``.
    """
    if raw is None:
        return Cue("", 0, 0)
    text = _field(raw, "text")
    return Cue(
        text="" if text is None else str(text),
        offset_ms=_to_ms(_field(raw, "start")),
        duration_ms=_to_ms(_field(raw, "dur", "duration")),
    )


def normalize_cues(raw_cues: Iterable[Any]) -> list[Cue]:
    """Normalise every record and return them in chronological order.

    Out-of-order input is stably sorted by offset, so cues sharing an offset
    keep their original relative order.
    """
    cues = [normalize_cue(r) for r in raw_cues]
    if any(b.offset_ms < a.offset_ms for a, b in zip(cues, cues[1:])):
        log.debug("Cues arrived out of order; sorting %d cues by offset", len(cues))
        cues.sort(key=lambda c: c.offset_ms)
    return cues


# ----------------------------
# Statistics
# ----------------------------

def transcript_stats(cues: list[Cue]) -> TranscriptStats:
    """Estimated duration, segment count and naive word count for *cues*."""
    duration_ms = max((c.end_ms for c in cues), default=None)
    words = sum(word_count(c.text) for c in cues)
    return TranscriptStats(duration_ms=duration_ms, segments=len(cues), words=words)
