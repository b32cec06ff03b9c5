from __future__ import annotations
from pathlib import Path
from typing import Mapping, Optional, Protocol
from movieprobe.domain.entities.diagnostics import DiagnosticResult
from movieprobe.domain.entities.media_path import MediaPath
from movieprobe.domain.entities.probe import ProbeReport
from movieprobe.domain.enums.stream_kind import StreamKind


class MediaProbePort(Protocol):
    def probe(self, path: MediaPath | Path | str) -> ProbeReport: ...


class FilterDiagnosticsPort(Protocol):
    def run_diagnostic_filter(
        self,
        path: MediaPath | Path | str,
        kind: StreamKind | str,
        filter_name: str,
        filter_args: Optional[Mapping[str, object]] = None,
    ) -> DiagnosticResult: ...

    def detect_volume(self, path: MediaPath | Path | str) -> DiagnosticResult: ...
