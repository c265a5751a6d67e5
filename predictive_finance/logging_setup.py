"""Log output for the dashboard.

Store fallbacks, rejected budget edits and newly added expenses are logged
under the ``predictive_finance`` logger.  Nothing is printed while the package
is imported as a library; ``dashboard.main`` and ``run_dashboard.py`` turn
output on by calling ``configure_logging()`` when they start.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "predictive_finance"
_CONFIGURED = False


def _parse_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.INFO
    env_val = os.getenv("PREDICTIVE_FINANCE_LOG_LEVEL")
    if env_val:
        return _parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send ``predictive_finance`` log records to ``stream``.

    Later calls are ignored, so a Streamlit rerun does not stack handlers.

    Args:
        level: Level number or name such as ``"debug"``.  Defaults to
            ``PREDICTIVE_FINANCE_LOG_LEVEL``, or INFO when that is unset.
        fmt: Record format; timestamp, logger name, level and message by default.
        stream: Where records are written, stderr unless given.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, attaching a ``NullHandler`` until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
