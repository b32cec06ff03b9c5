# tests/conftest.py
from __future__ import annotations
import json
import stat
from pathlib import Path
import pytest

from movieprobe.common import settings as settings_mod

SAMPLE_FFPROBE = {
    "format": {
        "filename": "awesome movie.mov",
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "start_time": "0.000000",
        "duration": "7.564000",
        "size": "455546",
        "bit_rate": "481846",
        "tags": {"creation_time": "2010-02-05T23:09:29.000000Z"},
    },
    "streams": [
        {
            "index": 0,
            "codec_type": "video",
            "codec_name": "h264",
            "pix_fmt": "yuv420p",
            "width": 640,
            "height": 480,
            "sample_aspect_ratio": "1:1",
            "display_aspect_ratio": "4:3",
            "avg_frame_rate": "30000/1001",
            "bit_rate": "371185",
            "tags": {"rotate": "90"},
        },
        {
            "index": 1,
            "codec_type": "audio",
            "codec_name": "aac",
            "sample_rate": "44100",
            "channels": 1,
            "bit_rate": "75832",
        },
    ],
}

ERROR_FFPROBE = {
    "error": {"code": -1094995529, "message": "Invalid data found when processing input"},
}


@pytest.fixture(autouse=True)
def _fresh_settings():
    # ensure a clean cache per test
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def probe_json() -> str:
    return json.dumps(SAMPLE_FFPROBE)


@pytest.fixture()
def error_json() -> str:
    return json.dumps(ERROR_FFPROBE)


@pytest.fixture()
def media_file(tmp_path) -> Path:
    f = tmp_path / "awesome movie.mov"
    f.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return f


@pytest.fixture()
def fake_bin(tmp_path):
    """Factory for an executable placeholder so shutil.which() resolves it."""
    def _make(name: str) -> Path:
        p = tmp_path / "bin" / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("#!/bin/sh\nexit 0\n")
        p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return p
    return _make
