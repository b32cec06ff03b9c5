from __future__ import annotations
from enum import StrEnum


class StreamKind(StrEnum):
    audio = "audio"
    video = "video"

    @property
    def filter_flag(self) -> str:
        """ffmpeg simple-filtergraph option for this stream type."""
        return "-af" if self is StreamKind.audio else "-vf"
