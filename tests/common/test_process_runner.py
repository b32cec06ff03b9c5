import sys

import pytest

from movieprobe.common.process.runner import (
    ProcessOutput,
    ToolInvocationError,
    ToolTimeoutError,
    run_process,
)


def test_run_process_captures_both_streams_and_status():
    code = "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)"
    out = run_process(sys.executable, ["-c", code])
    assert isinstance(out, ProcessOutput)
    assert out.stdout == b"out"
    assert out.stderr == b"err"
    assert out.returncode == 3


def test_run_process_passes_args_verbatim_without_shell():
    tricky = "my file; rm -rf $HOME 'quoted' \"double\" `tick`.mp4"
    out = run_process(sys.executable, ["-c", "import sys; sys.stdout.write(sys.argv[1])", tricky])
    assert out.stdout.decode() == tricky
    assert out.returncode == 0


def test_run_process_returns_raw_bytes():
    out = run_process(sys.executable, ["-c", "import sys; sys.stdout.buffer.write(bytes([0xe9, 0xff]))"])
    assert out.stdout == b"\xe9\xff"


def test_run_process_missing_binary_raises_invocation_error(tmp_path):
    missing = tmp_path / "no-such-ffprobe"
    with pytest.raises(ToolInvocationError) as ei:
        run_process(str(missing), ["-version"])
    assert ei.value.executable == str(missing)
    assert "no-such-ffprobe" in str(ei.value)


def test_run_process_timeout_raises():
    with pytest.raises(ToolTimeoutError) as ei:
        run_process(sys.executable, ["-c", "import time; time.sleep(5)"], timeout_sec=0.2)
    assert isinstance(ei.value, ToolInvocationError)
    assert ei.value.timeout_sec == 0.2
