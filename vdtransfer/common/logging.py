# vdtransfer/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

from vdtransfer.common.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "vdtransfer", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a named logger at `level` (default: settings.log_level).
    If neither the root logger nor this one has handlers, basicConfig runs once
    so library use from a script still prints something.
    """
    if level is None:
        level = get_settings().log_level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
