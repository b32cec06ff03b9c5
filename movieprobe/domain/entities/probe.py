# movieprobe/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from movieprobe.domain.policies import aspect


@dataclass(frozen=True)
class ProbeError:
    """Failure reported by ffprobe itself (`-show_error`)."""
    code: Optional[int] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class VideoStream:
    codec: Optional[str] = None
    colorspace: Optional[str] = None  # pix_fmt
    bitrate_kbps: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    sample_aspect_ratio: Optional[str] = None   # "W:H"
    display_aspect_ratio: Optional[str] = None  # "W:H"
    rotation: Optional[int] = None
    frame_rate: Optional[float] = None

    @property
    def resolution(self) -> Optional[str]:
        return aspect.resolution(self.width, self.height)

    @property
    def aspect_ratio(self) -> Optional[float]:
        return aspect.aspect_ratio(self.display_aspect_ratio, self.width, self.height)

    @property
    def pixel_aspect_ratio(self) -> float:
        return aspect.pixel_aspect_ratio(self.sample_aspect_ratio)


@dataclass(frozen=True)
class AudioStream:
    codec: Optional[str] = None
    channels: Optional[int] = None
    bitrate_kbps: Optional[int] = None
    sample_rate: Optional[int] = None


@dataclass(frozen=True)
class ProbeReport:
    """
    Normalized result of probing one file.

    Either data-bearing (format/stream attributes, `error` is None) or
    error-bearing (`error` set, every other field None). Callers should check
    `valid` before trusting media attributes.
    """
    container: Optional[str] = None
    size_bytes: Optional[int] = None
    duration_sec: Optional[float] = None
    start_time: Optional[float] = None
    bitrate_kbps: Optional[int] = None
    creation_time: Optional[datetime] = None
    video: Optional[VideoStream] = None
    audio: Optional[AudioStream] = None
    error: Optional[ProbeError] = None

    def __post_init__(self) -> None:
        if self.error is None:
            return
        populated = [f.name for f in fields(self) if f.name != "error" and getattr(self, f.name) is not None]
        if populated:
            raise ValueError(f"error-bearing ProbeReport cannot carry media fields: {', '.join(populated)}")

    @classmethod
    def failed(cls, code: Optional[int], message: Optional[str]) -> "ProbeReport":
        return cls(error=ProbeError(code=code, message=message))

    # ---- validity / presence -------------------------------------------------
    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def has_video(self) -> bool:
        return self.video is not None

    @property
    def has_audio(self) -> bool:
        return self.audio is not None

    @property
    def error_code(self) -> Optional[int]:
        return self.error.code if self.error else None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    # ---- derived metrics -----------------------------------------------------
    @property
    def duration(self) -> float:
        return self.duration_sec if self.duration_sec is not None else 0.0

    @property
    def resolution(self) -> Optional[str]:
        return self.video.resolution if self.video else None

    @property
    def aspect_ratio(self) -> Optional[float]:
        return self.video.aspect_ratio if self.video else None

    @property
    def pixel_aspect_ratio(self) -> float:
        if self.video is None:
            return aspect.DEFAULT_PIXEL_ASPECT_RATIO
        return self.video.pixel_aspect_ratio

    @property
    def frame_rate(self) -> Optional[float]:
        return self.video.frame_rate if self.video else None
