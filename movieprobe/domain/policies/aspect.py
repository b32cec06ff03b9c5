# movieprobe/domain/policies/aspect.py
"""
Pure geometry/timing metrics derived from probe attributes.

Absent inputs are `None`; a present-but-zero value is not treated as absent.
"""
from __future__ import annotations

import math
from typing import Optional

DEFAULT_PIXEL_ASPECT_RATIO = 1.0


def _finite_nonzero(value: float) -> Optional[float]:
    if not math.isfinite(value) or value == 0:
        return None
    return value


def parse_ratio(ratio: Optional[str]) -> Optional[float]:
    """
    "16:9" -> 1.777...; "0:1", "1:0", "abc" or None -> None.
    """
    if ratio is None or ":" not in ratio:
        return None
    w, h = ratio.split(":", 1)
    try:
        num, den = float(w), float(h)
    except ValueError:
        return None
    if den == 0:
        return None
    return _finite_nonzero(num / den)


def frame_rate_from_rational(rate: Optional[str]) -> Optional[float]:
    """
    ffprobe rationals look like "30000/1001". Returns fps rounded to 2 places,
    or None for "0/0", a bare number, or junk.
    """
    if rate is None or "/" not in rate:
        return None
    frames, seconds = rate.split("/", 1)
    try:
        n, d = float(frames), float(seconds)
    except ValueError:
        return None
    if d == 0:
        return None
    fps = n / d
    if not math.isfinite(fps):
        return None
    return round(fps, 2)


def resolution(width: Optional[int], height: Optional[int]) -> Optional[str]:
    if width is None or height is None:
        return None
    return f"{width}x{height}"


def aspect_ratio(
    display_aspect_ratio: Optional[str],
    width: Optional[int],
    height: Optional[int],
) -> Optional[float]:
    """Frame aspect ratio: DAR first, then raw dimensions, else None."""
    from_dar = parse_ratio(display_aspect_ratio)
    if from_dar is not None:
        return from_dar
    if width is None or height is None or height == 0:
        return None
    return _finite_nonzero(float(width) / float(height))


def pixel_aspect_ratio(sample_aspect_ratio: Optional[str]) -> float:
    # Square pixels unless SAR says otherwise; never None.
    from_sar = parse_ratio(sample_aspect_ratio)
    return from_sar if from_sar is not None else DEFAULT_PIXEL_ASPECT_RATIO
