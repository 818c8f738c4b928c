import json
from pathlib import Path

import pytest

from yt_digest.converter import extract_cues, load_cues
from yt_digest.cues import Cue


def test_extract_cues_shapes(fake_cues):
    assert extract_cues(fake_cues) == fake_cues
    assert extract_cues({"transcript": fake_cues}) == fake_cues
    multi = {"items": [{"transcript": fake_cues[:1]}, {"transcript": fake_cues[1:]}]}
    assert extract_cues(multi) == fake_cues
    assert extract_cues({"unrelated": 1}) == []
    assert extract_cues("nope") == []


def test_load_cues_from_saved_download(tmp_path: Path):
    # same shape as a JSON transcript saved by youtube-transcript-api users
    blob = {
        "video_id": "abc",
        "transcript": [
            {"text": "later", "start": 4.0, "duration": 1.0},
            {"text": "first", "start": 0.0, "duration": 2.0},
        ],
    }
    src = tmp_path / "abc.json"
    src.write_text(json.dumps(blob), encoding="utf-8")
    assert load_cues(src) == [Cue("first", 0, 2000), Cue("later", 4000, 1000)]


def test_load_cues_empty_file_yields_no_cues(tmp_path: Path):
    src = tmp_path / "empty.json"
    src.write_text("[]", encoding="utf-8")
    assert load_cues(src) == []


def test_load_cues_invalid_json(tmp_path: Path):
    src = tmp_path / "bad.json"
    src.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        load_cues(src)


@pytest.mark.parametrize(
    "blob",
    [
        {"items": None},
        {"items": [1, "x"]},
        {"items": [{"transcript": 5}]},
        {"transcript": {"text": "not a list"}},
    ],
)
def test_extract_cues_ignores_odd_containers(blob):
    assert extract_cues(blob) == []
