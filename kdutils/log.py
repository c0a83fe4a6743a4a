"""Named logger lookup with an application-replaceable factory."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional

LoggerFactory = Callable[[str, int], logging.Logger]

_state: Dict[str, Optional[LoggerFactory]] = {"factory": None}

_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def get_logger(name: str, default_level: int = logging.WARNING) -> logging.Logger:
    """Return the logger called ``name``.

    If a factory is installed it decides. Otherwise an existing logger is
    reused, and a new one is created writing to stdout with ``default_level``.
    """
    factory = _state["factory"]
    if factory is not None:
        return factory(name, default_level)

    existing = logging.Logger.manager.loggerDict.get(name)
    if isinstance(existing, logging.Logger):
        return existing

    logger = logging.getLogger(name)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(default_level)
    return logger


def set_logger_factory(factory: Optional[LoggerFactory]) -> None:
    """Install a factory used by :func:`get_logger`; None restores the default."""
    _state["factory"] = factory


def logger_factory() -> Optional[LoggerFactory]:
    """Return the installed factory, or None."""
    return _state["factory"]