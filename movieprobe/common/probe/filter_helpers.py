# movieprobe/common/probe/filter_helpers.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from movieprobe.common.logging import get_logger
from movieprobe.common.probe.ffprobe_helpers import path_arg
from movieprobe.domain.entities.diagnostics import DiagnosticResult, DiagnosticValue
from movieprobe.domain.enums.stream_kind import StreamKind

logger = get_logger()

_HISTOGRAM_KEY = re.compile(r"histogram_(\d+)db")
_DB_VALUE = re.compile(r"(-?[\d.]+) dB")
_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def build_filter_cmd(
    input_path: str | Path,
    kind: StreamKind | str,
    filter_name: str,
    filter_args: Optional[Mapping[str, object]] = None,
    ffmpeg_bin: str = "ffmpeg",
) -> List[str]:
    """
    ffmpeg argv that runs a single analysis filter and discards the output:
        ffmpeg -i <path> -af volumedetect -f null -
    `filter_args` become `name=k1=v1:k2=v2`, in mapping order.
    """
    try:
        kind = StreamKind(kind)
    except ValueError:
        raise ValueError(f"Unknown filter type: {kind!r}") from None

    graph = filter_name
    if filter_args:
        graph += "=" + ":".join(f"{k}={v}" for k, v in filter_args.items())

    return [
        str(ffmpeg_bin),
        "-i", path_arg(input_path),
        kind.filter_flag, graph,
        "-f", "null",
        "-",
    ]


def parse_filter_output(text: str, filter_name: str) -> DiagnosticResult:
    """
    Collect `[Parsed_<filter>_0 @ 0x...] key: value` lines from ffmpeg's
    stderr. Never raises on odd values; they coerce to 0.
    """
    line_re = re.compile(rf"\[Parsed_{re.escape(filter_name)}_0 @ [^\]]+\] (.+)")
    values: Dict[str, DiagnosticValue] = {}
    histogram: List[Tuple[int, int]] = []

    for line in text.splitlines():
        m = line_re.search(line)
        if not m:
            continue
        key, sep, value = m.group(1).partition(": ")
        if not sep:
            logger.debug("skipping %s line without a value: %r", filter_name, line)
            continue

        bucket = _HISTOGRAM_KEY.fullmatch(key)
        if bucket:
            histogram.append((-int(bucket.group(1)), _to_int(value)))
        else:
            values[key] = _to_db(value) if _DB_VALUE.search(value) else _to_int(value)

    return DiagnosticResult(filter_name=filter_name, values=values, histogram=tuple(histogram))


def _to_db(value: str) -> DiagnosticValue:
    m = _DB_VALUE.search(value)
    try:
        return float(m.group(1))
    except (AttributeError, ValueError):
        # "1.2.3 dB" and friends
        return _to_int(value)


def _to_int(value: str) -> int:
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else 0
