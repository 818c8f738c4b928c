from __future__ import annotations

import re
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from yt_digest import core
from yt_digest.cues import Cue


@pytest.fixture(autouse=True)
def restore_sys_argv(monkeypatch):
    original = sys.argv.copy()
    yield
    sys.argv[:] = original


@pytest.fixture
def fake_cues():
    """Raw records in the shape the caption collaborator hands back."""
    return [
        {"text": "Hello world", "start": "0", "dur": "2.5"},
        {"text": "This is a test", "start": "2.5", "dur": "2.5"},
        {"text": "Final segment", "start": "5.0", "dur": "2.0"},
    ]


@pytest.fixture
def fake_fetch(fake_cues):
    calls: list[tuple[str, str]] = []

    def _fetch(video_id, language):
        calls.append((video_id, language))
        return fake_cues

    _fetch.calls = calls
    return _fetch


@pytest.fixture
def patch_transcript(monkeypatch, fake_cues):
    class _FakeApi:
        instances: list = []

        def __init__(self, *a, **kw):
            self.kwargs = kw
            self.fetched: list = []
            _FakeApi.instances.append(self)

        def fetch(self, video_id, languages=None):
            self.fetched.append((video_id, languages))
            return fake_cues

    monkeypatch.setattr(core, "YouTubeTranscriptApi", _FakeApi)
    monkeypatch.setattr(core, "_pick_ua", lambda *a, **kw: "test-UA")
    yield _FakeApi


def make_cues(*triples: tuple[str, int, int]) -> list[Cue]:
    """Build cues from ``(text, offset_ms, duration_ms)`` triples."""
    return [Cue(text, offset, duration) for text, offset, duration in triples]


_ANSI_RE = re.compile(r"\x1B\[[0-9;]*[A-Za-z]")


def strip_ansi(txt: str) -> str:
    return _ANSI_RE.sub("", txt)
