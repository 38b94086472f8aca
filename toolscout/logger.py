"""Logging configuration for the **ToolScout** project.

Highlights
----------
* One project logger, ``ToolScout``, with console output on *stderr* (stdout
  carries the JSON the CLI prints) and optional rotating file output.
* Pipeline stages log through child loggers from :func:`get_logger`, so the
  ``%(name)s`` column reads ``ToolScout.fetcher``, ``ToolScout.engine`` ...::

      from toolscout.logger import get_logger
      log = get_logger("fetcher")
      log.info("Fetching %s", url)
* aiohttp's own loggers are kept at WARNING or above unless DEBUG is requested.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "ToolScout"
_THIRD_PARTY: Final[tuple[str, ...]] = ("aiohttp.client", "aiohttp.internal")

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _stderr_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the project logger, replacing any previous handlers.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console‑only output.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    for old in lg.handlers[:]:
        lg.removeHandler(old)
        old.close()
    lg.addHandler(_stderr_handler(log_format))
    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))
    lg.propagate = False

    third_party_level = max(lg.level, logging.WARNING) if lg.level > logging.DEBUG else logging.DEBUG
    for name in _THIRD_PARTY:
        logging.getLogger(name).setLevel(third_party_level)
    return lg


def get_logger(component: str | None = None) -> logging.Logger:
    """Project logger, or its ``ToolScout.<component>`` child."""
    if not component:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{component}")


# --------------------------------------------------------------------------- #
# Ready‑to‑use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()

__all__ = ["logger", "get_logger", "init_logging"]
