# movieprobe/services/movie.py
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from movieprobe.domain.entities.diagnostics import DiagnosticResult
from movieprobe.domain.entities.media_path import MediaPath
from movieprobe.domain.entities.probe import ProbeReport
from movieprobe.domain.enums.stream_kind import StreamKind
from movieprobe.domain.ports.probe import FilterDiagnosticsPort, MediaProbePort


class Movie:
    """
    A probed media file.

    The file is checked for existence, then probed once; the resulting
    ProbeReport is available as `report`. Filter diagnostics run on demand
    and are not cached.

        movie = Movie("clip.mp4")
        if movie.valid:
            print(movie.report.resolution, movie.detect_volume()["mean_volume"])
    """

    def __init__(
        self,
        path: MediaPath | Path | str,
        *,
        prober: Optional[MediaProbePort] = None,
        filters: Optional[FilterDiagnosticsPort] = None,
    ):
        self.path = MediaPath.of(path)
        if prober is None:
            from movieprobe.services.probe.ffprobe_adapter import FFprobeAdapter
            prober = FFprobeAdapter()
        self._filters = filters
        self.report: ProbeReport = prober.probe(self.path)

    def __repr__(self) -> str:
        return f"Movie({str(self.path)!r}, valid={self.valid})"

    @property
    def valid(self) -> bool:
        return self.report.valid

    @property
    def has_video(self) -> bool:
        return self.report.has_video

    @property
    def has_audio(self) -> bool:
        return self.report.has_audio

    @property
    def duration(self) -> float:
        return self.report.duration

    # ---- diagnostics ---------------------------------------------------------
    def _filter_adapter(self) -> FilterDiagnosticsPort:
        if self._filters is None:
            from movieprobe.services.probe.ffmpeg_filter_adapter import FFmpegFilterAdapter
            self._filters = FFmpegFilterAdapter()
        return self._filters

    def run_diagnostic_filter(
        self,
        kind: StreamKind | str,
        filter_name: str,
        filter_args: Optional[Mapping[str, object]] = None,
    ) -> DiagnosticResult:
        return self._filter_adapter().run_diagnostic_filter(self.path, kind, filter_name, filter_args)

    def detect_volume(self) -> DiagnosticResult:
        return self._filter_adapter().detect_volume(self.path)
