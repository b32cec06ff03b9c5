# movieprobe/common/process/runner.py
from __future__ import annotations

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from movieprobe.common.logging import get_logger

logger = get_logger()


@dataclass(eq=False)
class ToolInvocationError(RuntimeError):
    """The external executable could not be started."""
    message: str
    executable: Optional[str] = None
    stderr: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ToolTimeoutError(ToolInvocationError):
    """The child did not exit before the deadline and was killed."""
    timeout_sec: Optional[float] = None


@dataclass(eq=False)
class BinaryNotFoundError(ToolInvocationError):
    """Configured binary is not on PATH / not executable."""


def resolve_binary(candidate: str, setting_name: str) -> str:
    resolved = shutil.which(candidate)
    if not resolved:
        raise BinaryNotFoundError(
            f"{candidate} not found or not executable; set {setting_name} or install ffmpeg.",
            executable=candidate,
        )
    return resolved


@dataclass(frozen=True)
class ProcessOutput:
    stdout: bytes
    stderr: bytes
    returncode: int


def run_process(
    executable: str,
    args: Sequence[str],
    *,
    timeout_sec: Optional[float] = None,
) -> ProcessOutput:
    """
    Run `executable` with `args` as an argument vector (never through a shell)
    and capture both streams as raw bytes. A non-zero exit status is returned,
    not raised; only a failure to spawn (or a timeout) raises.
    """
    cmd = [str(executable), *(str(a) for a in args)]
    logger.debug("exec: %s", shlex.join(cmd))

    try:
        proc = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout_sec,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ToolTimeoutError(
            f"{executable} timed out after {timeout_sec}s",
            executable=str(executable),
            timeout_sec=timeout_sec,
        ) from e
    except OSError as e:
        raise ToolInvocationError(
            f"Failed to execute {executable}: {e.strerror or e}",
            executable=str(executable),
            stderr=str(e),
        ) from e

    if proc.returncode != 0:
        logger.debug("%s exited with status %s", executable, proc.returncode)
    return ProcessOutput(stdout=proc.stdout or b"", stderr=proc.stderr or b"", returncode=proc.returncode)
