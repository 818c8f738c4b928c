"""
Cue grouping (two shapes, both single-pass).

* sections   – contiguous, time-windowed runs of cues
* paragraphs – sentence-count-bounded runs of text, timing-agnostic

Input is an ordered list of :class:`~yt_digest.cues.Cue`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from .constants import SECTION_WINDOW_SECONDS, SENTENCES_PER_PARAGRAPH
from .cues import Cue

__all__ = [
    "Section",
    "group_into_sections",
    "split_into_paragraphs",
]


@dataclass(frozen=True)
class Section:
    start_ms: int
    end_ms: int
    text: str


# ----------------------------
# Time windows
# ----------------------------

def group_into_sections(
    cues: List[Cue], window_seconds: float = SECTION_WINDOW_SECONDS
) -> List[Section]:
    """Greedily partition *cues* into sections spanning at most *window_seconds*.

    A cue starting more than the window after the current section's start
    closes that section (its end is the cue's offset) and opens the next one.
    The last section ends where the last cue ends.  No lookahead: a long
    silence can yield a section whose span dwarfs its spoken content.
    """
    if window_seconds < 0:
        raise ValueError("window_seconds must be >= 0")
    if not cues:
        return []

    window_ms = window_seconds * 1000
    sections: List[Section] = []
    start = cues[0].offset_ms
    texts = [cues[0].text]

    for cue in cues[1:]:
        if cue.offset_ms - start > window_ms:
            sections.append(Section(start, cue.offset_ms, " ".join(texts)))
            start = cue.offset_ms
            texts = [cue.text]
        else:
            texts.append(cue.text)

    sections.append(Section(start, cues[-1].end_ms, " ".join(texts)))
    return sections


# ----------------------------
# Sentences
# ----------------------------

# one or more terminators form a single boundary
_SENTENCE_END_RE = re.compile(r"[.!?]+")


def split_into_paragraphs(
    cues: List[Cue], sentences_per_paragraph: int = SENTENCES_PER_PARAGRAPH
) -> List[str]:
    """Regroup the transcript text into paragraphs of N sentences.

    Every sentence is re-terminated with a period, so ``"Really?"`` comes
    out as ``"Really."``.  The trailing partial paragraph is kept.
    """
    if sentences_per_paragraph < 1:
        raise ValueError("sentences_per_paragraph must be >= 1")

    full_text = " ".join(c.text for c in cues)
    sentences = [
        s.strip() for s in _SENTENCE_END_RE.split(full_text) if s.strip()
    ]

    paragraphs: List[str] = []
    for i in range(0, len(sentences), sentences_per_paragraph):
        chunk = sentences[i : i + sentences_per_paragraph]
        paragraphs.append("".join(f"{s}. " for s in chunk).strip())
    return paragraphs
