from types import SimpleNamespace

from yt_digest.cues import Cue, normalize_cue, normalize_cues, transcript_stats

from conftest import make_cues


def test_normalize_string_seconds():
    cue = normalize_cue({"text": "Hi", "start": "1.5", "dur": "2"})
    assert cue == Cue("Hi", 1500, 2000)


def test_normalize_numeric_seconds_any_precision():
    cue = normalize_cue({"text": "Hi", "start": 0.1234, "dur": 1.0006})
    assert (cue.offset_ms, cue.duration_ms) == (123, 1001)


def test_normalize_accepts_duration_key_and_snippet_objects():
    snippet = SimpleNamespace(text="From API", start=3.0, duration=1.25)
    assert normalize_cue(snippet) == Cue("From API", 3000, 1250)
    assert normalize_cue({"text": "x", "start": 1, "duration": 2}) == Cue("x", 1000, 2000)


def test_malformed_records_never_raise():
    raw = [
        {"text": "Good segment", "start": "0", "dur": "2"},
        {"text": "Missing duration", "start": "2"},
        {"text": "Missing start", "dur": "2"},
        None,
        {"start": "6", "dur": "2"},
        {"text": "Garbage", "start": "abc", "dur": "nan"},
        {"text": "Negative", "start": "-4", "dur": "1"},
        {"text": "Huge", "start": "1e308", "dur": "1e400"},
    ]
    cues = [normalize_cue(r) for r in raw]
    assert cues[1] == Cue("Missing duration", 2000, 0)
    assert cues[2] == Cue("Missing start", 0, 2000)
    assert cues[3] == Cue("", 0, 0)
    assert cues[4] == Cue("", 6000, 2000)
    assert cues[5] == Cue("Garbage", 0, 0)
    assert cues[6] == Cue("Negative", 0, 1000)
    assert cues[7] == Cue("Huge", 0, 0)


def test_normalize_cues_keeps_chronological_input():
    raw = [{"text": t, "start": s, "dur": 1} for t, s in [("a", 0), ("b", 1), ("c", 1)]]
    assert [c.text for c in normalize_cues(raw)] == ["a", "b", "c"]


def test_normalize_cues_sorts_out_of_order_input_stably():
    raw = [
        {"text": "late", "start": 10, "dur": 1},
        {"text": "early", "start": 0, "dur": 1},
        {"text": "tie-1", "start": 5, "dur": 1},
        {"text": "tie-2", "start": 5, "dur": 1},
    ]
    assert [c.text for c in normalize_cues(raw)] == ["early", "tie-1", "tie-2", "late"]


def test_stats_word_count():
    cues = make_cues(
        ("Hello world test", 0, 2000),
        ("This is another test", 2000, 3000),
        ("Final segment here", 5000, 2000),
    )
    stats = transcript_stats(cues)
    assert stats.words == 10
    assert stats.segments == 3
    assert stats.duration_ms == 7000


def test_stats_duration_is_max_end_not_last_end():
    cues = make_cues(("long", 0, 9000), ("short", 1000, 500))
    assert transcript_stats(cues).duration_ms == 9000


def test_stats_empty_transcript():
    stats = transcript_stats([])
    assert stats.duration_ms is None
    assert (stats.segments, stats.words) == (0, 0)
