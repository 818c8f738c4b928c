"""yt_digest.converter
Load previously saved caption JSON so it can be rendered without touching
the network.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .cues import Cue, normalize_cues

__all__ = [
    "extract_cues",
    "load_cues",
]

log = logging.getLogger(__name__)


# Recursive flatten helper ----------------------------------------------------

def extract_cues(blob):
    """Return a flat list of raw cues from a list, single- or multi-video object."""
    if isinstance(blob, list):
        return blob
    if not isinstance(blob, dict):
        return []
    if "transcript" in blob:
        found = blob["transcript"]
        return found if isinstance(found, list) else []
    if isinstance(blob.get("items"), list):
        cues: list = []
        for item in blob["items"]:
            cues.extend(extract_cues(item))
        return cues
    return []


def load_cues(path: Path | str) -> list[Cue]:
    """Read a caption JSON file and return normalised cues.

    Raises ``ValueError`` for unreadable JSON.
    """
    p = Path(path).expanduser()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{p} is not valid JSON ({exc})") from exc

    raw = extract_cues(data)
    if not raw:
        log.warning("No cues in %s", p)
    cues = normalize_cues(raw)
    log.info("✔ loaded %d cues from %s", len(cues), p.name)
    return cues
