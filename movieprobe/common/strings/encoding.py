# movieprobe/common/strings/encoding.py
from __future__ import annotations

from movieprobe.common.logging import get_logger

logger = get_logger()

DEFAULT_ENCODING = "utf-8"
FALLBACK_ENCODING = "latin-1"


def normalize_output(raw: bytes | str) -> str:
    """
    Decode tool output. ffprobe/ffmpeg occasionally emit tag metadata that is
    not valid UTF-8; those bytes are reinterpreted as Latin-1, which maps every
    byte, so this never raises. No trimming or other cleanup is applied.
    """
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as e:
        logger.debug("output is not %s (%s); falling back to %s", DEFAULT_ENCODING, e.reason, FALLBACK_ENCODING)
        return raw.decode(FALLBACK_ENCODING)
