from __future__ import annotations
import pytest

from movieprobe.common.probe.ffprobe_helpers import parse_ffprobe
from movieprobe.domain.entities.diagnostics import DiagnosticResult
from movieprobe.services.movie import Movie


class _FakeProber:
    def __init__(self, text: str):
        self.text = text
        self.paths = []

    def probe(self, path):
        self.paths.append(path)
        return parse_ffprobe(self.text)


class _FakeFilters:
    def __init__(self):
        self.calls = []

    def run_diagnostic_filter(self, path, kind, filter_name, filter_args=None):
        self.calls.append((path, kind, filter_name, filter_args))
        return DiagnosticResult(filter_name, {"x": 1})

    def detect_volume(self, path):
        self.calls.append((path, "audio", "volumedetect", None))
        return DiagnosticResult("volumedetect", {"mean_volume": -23.5}, ((-26, 42),))


def test_movie_probes_once_at_construction(media_file, probe_json):
    prober = _FakeProber(probe_json)
    movie = Movie(media_file, prober=prober)
    assert len(prober.paths) == 1
    assert str(prober.paths[0]) == str(media_file)
    assert movie.valid and movie.has_video and movie.has_audio
    assert movie.duration == 7.56
    assert movie.report.resolution == "640x480"
    assert "valid=True" in repr(movie)


def test_movie_invalid_file(media_file, error_json):
    movie = Movie(media_file, prober=_FakeProber(error_json))
    assert not movie.valid
    assert movie.duration == 0.0
    assert not movie.has_video


def test_movie_missing_file_fails_before_probing(tmp_path, probe_json):
    prober = _FakeProber(probe_json)
    with pytest.raises(FileNotFoundError):
        Movie(tmp_path / "nope.mov", prober=prober)
    assert prober.paths == []


def test_movie_diagnostics_delegate(media_file, probe_json):
    filters = _FakeFilters()
    movie = Movie(media_file, prober=_FakeProber(probe_json), filters=filters)

    vol = movie.detect_volume()
    assert vol["mean_volume"] == -23.5
    assert vol.histogram == ((-26, 42),)

    res = movie.run_diagnostic_filter("video", "cropdetect", {"limit": 24})
    assert res["x"] == 1
    assert filters.calls[-1][1:] == ("video", "cropdetect", {"limit": 24})
    assert filters.calls[-1][0] == movie.path
