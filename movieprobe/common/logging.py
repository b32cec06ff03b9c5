# movieprobe/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "movieprobe", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return the package logger.
    If no handlers are set, we add a basicConfig once. Level defaults to
    Settings.log_level.
    """
    if level is None:
        from movieprobe.common.settings import get_settings
        level = get_settings().log_level.upper()

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
