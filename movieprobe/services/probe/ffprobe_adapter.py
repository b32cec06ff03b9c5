# movieprobe/services/probe/ffprobe_adapter.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from movieprobe.common.logging import get_logger
from movieprobe.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_ffprobe
from movieprobe.common.process.runner import resolve_binary, run_process
from movieprobe.common.settings import get_settings
from movieprobe.common.strings.encoding import normalize_output
from movieprobe.domain.entities.media_path import MediaPath
from movieprobe.domain.entities.probe import ProbeReport
from movieprobe.domain.ports.probe import MediaProbePort

logger = get_logger()


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    Holds only configuration, so one instance can be shared between threads.
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        self.ffprobe_bin = resolve_binary(ffprobe_bin or cfg.ffprobe_bin, "FFPROBE_BIN")
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.process.probe_timeout_sec

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: MediaPath | Path | str) -> ProbeReport:
        media = MediaPath.of(path)
        cmd = build_ffprobe_cmd(media, ffprobe_bin=self.ffprobe_bin)

        out = run_process(cmd[0], cmd[1:], timeout_sec=self.timeout_sec)
        report = parse_ffprobe(normalize_output(out.stdout))

        if not report.valid:
            logger.warning(
                "ffprobe could not read %s (code=%s): %s",
                media, report.error_code, report.error_message,
            )
        return report
