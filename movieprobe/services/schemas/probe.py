# movieprobe/services/schemas/probe.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeErrorOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: Optional[int] = None
    message: Optional[str] = None


class VideoStreamOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    codec: Optional[str] = None
    colorspace: Optional[str] = None
    bitrate_kbps: Optional[int] = Field(None, ge=0)
    width: Optional[int] = Field(None, ge=0)
    height: Optional[int] = Field(None, ge=0)
    sample_aspect_ratio: Optional[str] = None
    display_aspect_ratio: Optional[str] = None
    rotation: Optional[int] = None
    frame_rate: Optional[float] = None

    # derived
    resolution: Optional[str] = None
    aspect_ratio: Optional[float] = None
    pixel_aspect_ratio: float = 1.0


class AudioStreamOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    codec: Optional[str] = None
    channels: Optional[int] = Field(None, ge=0)
    bitrate_kbps: Optional[int] = Field(None, ge=0)
    sample_rate: Optional[int] = Field(None, ge=0)


class ProbeReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    path: Optional[str] = None
    valid: bool
    error: Optional[ProbeErrorOut] = None

    container: Optional[str] = None
    size_bytes: Optional[int] = Field(None, ge=0)
    duration: float = 0.0
    start_time: Optional[float] = None
    bitrate_kbps: Optional[int] = Field(None, ge=0)
    creation_time: Optional[datetime] = None

    has_video: bool = False
    has_audio: bool = False
    video: Optional[VideoStreamOut] = None
    audio: Optional[AudioStreamOut] = None
