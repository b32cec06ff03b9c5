from movieprobe.services.schemas.probe import (
    ProbeErrorOut,
    VideoStreamOut,
    AudioStreamOut,
    ProbeReportOut,
)

__all__ = [
    "ProbeErrorOut",
    "VideoStreamOut",
    "AudioStreamOut",
    "ProbeReportOut",
]
