"""
Logger di modulo con formato ``[nome] messaggio`` su stderr.
"""
from __future__ import annotations

import logging
import sys

_FORMAT = "[%(name)s] %(message)s"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Restituisce un logger configurato una sola volta per nome."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger
