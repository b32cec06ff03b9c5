# movieprobe/domain/entities/media_path.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MediaPath:
    """
    Location of the file under analysis. Must exist when constructed, so a
    missing file fails before any ffprobe/ffmpeg process is spawned.
    """
    path: Path

    def __post_init__(self) -> None:
        p = Path(self.path)
        object.__setattr__(self, "path", p)
        if not p.is_file():
            raise FileNotFoundError(f"the file '{p}' does not exist")

    @classmethod
    def of(cls, value: "MediaPath | Path | str") -> "MediaPath":
        return value if isinstance(value, MediaPath) else cls(Path(value))

    def __str__(self) -> str:
        return str(self.path)

    def __fspath__(self) -> str:
        return str(self.path)
