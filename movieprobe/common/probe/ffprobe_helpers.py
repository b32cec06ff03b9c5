# movieprobe/common/probe/ffprobe_helpers.py
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from movieprobe.common.logging import get_logger
from movieprobe.domain.entities.probe import AudioStream, ProbeReport, VideoStream
from movieprobe.domain.policies.aspect import frame_rate_from_rational

logger = get_logger()


@dataclass(eq=False)
class MalformedReportError(ValueError):
    """ffprobe output could not be read as a JSON report."""
    message: str
    output: Optional[str] = None

    def __str__(self) -> str:
        return self.message


def path_arg(input_path: str | Path) -> str:
    """
    argv token for an input file. A relative name starting with "-" would be
    read as an option by ffmpeg/ffprobe, so it gets a "./" prefix.
    """
    s = str(input_path)
    return f"./{s}" if s.startswith("-") else s


def build_ffprobe_cmd(input_path: str | Path, ffprobe_bin: str = "ffprobe") -> List[str]:
    """
    ffprobe argv emitting format, streams and any error as one JSON document.
    """
    return [
        str(ffprobe_bin),
        "-v", "quiet",
        "-of", "json",
        "-show_format",
        "-show_streams",
        "-show_error",
        path_arg(input_path),
    ]


def parse_ffprobe(text: str) -> ProbeReport:
    """
    Deserialize ffprobe's JSON output into a ProbeReport.
    Raises MalformedReportError when `text` is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedReportError(f"ffprobe produced invalid JSON: {e.msg}", output=text) from e
    if not isinstance(data, dict):
        raise MalformedReportError("ffprobe JSON is not an object", output=text)
    return parse_ffprobe_data(data)


def parse_ffprobe_data(data: Dict[str, Any]) -> ProbeReport:
    """
    Build a ProbeReport from an already-decoded ffprobe document.
    Safe to call in unit tests with fixture JSON.
    """
    err = data.get("error")
    if err is not None:
        err = err if isinstance(err, dict) else {}
        return ProbeReport.failed(_parse_int(err.get("code")), err.get("message"))

    fmt = data.get("format") or {}
    streams = data.get("streams") or []
    if not isinstance(fmt, dict) or not isinstance(streams, list):
        raise MalformedReportError("ffprobe JSON has a non-object format or non-list streams")
    streams = [s for s in streams if isinstance(s, dict)]

    # first stream of each type wins; extra tracks are ignored
    vstream = next((s for s in streams if s.get("codec_type") == "video"), None)
    astream = next((s for s in streams if s.get("codec_type") == "audio"), None)

    duration = _parse_float(fmt.get("duration"))

    return ProbeReport(
        container=fmt.get("format_name"),
        size_bytes=_parse_int(fmt.get("size")) or 0,
        duration_sec=round(duration, 2) if duration is not None else None,
        start_time=_parse_float(fmt.get("start_time")) or 0.0,
        bitrate_kbps=_parse_kbps(fmt.get("bit_rate")),
        creation_time=_parse_timestamp(_get_tag(fmt, "creation_time")),
        video=_video_stream(vstream) if vstream is not None else None,
        audio=_audio_stream(astream) if astream is not None else None,
    )


def _video_stream(s: Dict[str, Any]) -> VideoStream:
    return VideoStream(
        codec=s.get("codec_name"),
        colorspace=s.get("pix_fmt"),
        bitrate_kbps=_parse_kbps(s.get("bit_rate")),
        width=_parse_int(s.get("width")),
        height=_parse_int(s.get("height")),
        sample_aspect_ratio=s.get("sample_aspect_ratio"),
        display_aspect_ratio=s.get("display_aspect_ratio"),
        rotation=_parse_int(_get_tag(s, "rotate")),
        frame_rate=frame_rate_from_rational(s.get("avg_frame_rate")),
    )


def _audio_stream(s: Dict[str, Any]) -> AudioStream:
    return AudioStream(
        codec=s.get("codec_name"),
        channels=_parse_int(s.get("channels")),
        bitrate_kbps=_parse_kbps(s.get("bit_rate")),
        sample_rate=_parse_int(s.get("sample_rate")),
    )


# ---- tiny parse helpers -------------------------------------------------------
def _parse_float(x: Any) -> Optional[float]:
    if x is None:
        return None
    try:
        return float(x)
    except (TypeError, ValueError):
        return None


def _parse_int(x: Any) -> Optional[int]:
    if x is None:
        return None
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return None


def _parse_kbps(x: Any) -> Optional[int]:
    bps = _parse_int(x)
    if bps is None or bps < 0:
        return None
    return bps // 1000


def _get_tag(obj: Optional[Dict[str, Any]], key: str) -> Optional[str]:
    if not obj:
        return None
    tags = obj.get("tags") or {}
    if not isinstance(tags, dict):
        return None
    val = tags.get(key)
    return str(val) if val is not None else None


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        logger.warning("Unparseable creation_time tag: %r", value)
        return None
