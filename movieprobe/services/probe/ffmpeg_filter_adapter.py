# movieprobe/services/probe/ffmpeg_filter_adapter.py
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from movieprobe.common.logging import get_logger
from movieprobe.common.probe.filter_helpers import build_filter_cmd, parse_filter_output
from movieprobe.common.process.runner import resolve_binary, run_process
from movieprobe.common.settings import get_settings
from movieprobe.common.strings.encoding import normalize_output
from movieprobe.domain.entities.diagnostics import DiagnosticResult
from movieprobe.domain.entities.media_path import MediaPath
from movieprobe.domain.enums.stream_kind import StreamKind
from movieprobe.domain.ports.probe import FilterDiagnosticsPort

logger = get_logger()


class FFmpegFilterAdapter(FilterDiagnosticsPort):
    """
    Runs one ffmpeg analysis filter against a file (output goes to the null
    muxer) and parses the measurements ffmpeg logs on stderr.
    """

    def __init__(self, ffmpeg_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        self.ffmpeg_bin = resolve_binary(ffmpeg_bin or cfg.ffmpeg_bin, "FFMPEG_BIN")
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.process.filter_timeout_sec

    def run_diagnostic_filter(
        self,
        path: MediaPath | Path | str,
        kind: StreamKind | str,
        filter_name: str,
        filter_args: Optional[Mapping[str, object]] = None,
    ) -> DiagnosticResult:
        media = MediaPath.of(path)
        cmd = build_filter_cmd(media, kind, filter_name, filter_args, ffmpeg_bin=self.ffmpeg_bin)

        out = run_process(cmd[0], cmd[1:], timeout_sec=self.timeout_sec)
        if out.returncode != 0:
            logger.warning("ffmpeg %s exited with %s for %s", filter_name, out.returncode, media)

        # filters log their measurements on stderr, not stdout
        result = parse_filter_output(normalize_output(out.stderr), filter_name)
        logger.debug("%s on %s: %d values, %d histogram buckets",
                     filter_name, media, len(result), len(result.histogram))
        return result

    def detect_volume(self, path: MediaPath | Path | str) -> DiagnosticResult:
        return self.run_diagnostic_filter(path, StreamKind.audio, "volumedetect")
