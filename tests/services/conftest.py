# tests/services/conftest.py
from __future__ import annotations
import pytest

from movieprobe.common.process.runner import ProcessOutput


class _FakeRunner:
    """Test double for run_process that records argv and returns canned output."""

    def __init__(self, stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
        self.output = ProcessOutput(stdout=stdout, stderr=stderr, returncode=returncode)
        self.calls = []

    def __call__(self, executable, args, *, timeout_sec=None):
        self.calls.append({"executable": executable, "args": list(args), "timeout_sec": timeout_sec})
        return self.output


@pytest.fixture()
def fake_runner():
    return _FakeRunner


@pytest.fixture()
def ffprobe_path(fake_bin):
    return fake_bin("ffprobe")


@pytest.fixture()
def ffmpeg_path(fake_bin):
    return fake_bin("ffmpeg")
