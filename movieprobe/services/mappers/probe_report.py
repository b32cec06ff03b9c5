# movieprobe/services/mappers/probe_report.py
from __future__ import annotations

from typing import Optional

from movieprobe.domain.entities.media_path import MediaPath
from movieprobe.domain.entities.probe import ProbeReport
from movieprobe.services.schemas.probe import ProbeReportOut


def to_probe_report_out(report: ProbeReport, path: Optional[MediaPath] = None) -> ProbeReportOut:
    """
    Domain ProbeReport -> JSON-friendly schema, derived metrics included.
    Properties (valid, resolution, ...) are read via from_attributes.
    """
    out = ProbeReportOut.model_validate(report)
    if path is not None:
        out = out.model_copy(update={"path": str(path)})
    return out
