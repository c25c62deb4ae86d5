"""Logging for ``n26_hledger``.

Every module logs through ``get_logger("n26_hledger.<module>")``. Nothing is
printed until ``configure_logging`` runs (the ``n26-hledger`` command does so
before converting); a host application that embeds the converter can instead
configure the ``n26_hledger`` logger itself.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "n26_hledger"
LEVEL_ENV_VAR = "N26_HLEDGER_LOG_LEVEL"
DEFAULT_FORMAT = "%(levelname)s %(name)s %(message)s"

_CONFIGURED = False


class _StderrHandler(logging.StreamHandler):
    """Writes to ``sys.stderr`` as it is when each record is emitted."""

    @property
    def stream(self) -> IO[str]:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        pass


def _parse_level(level: int | str | None) -> int:
    """``None`` reads ``N26_HLEDGER_LOG_LEVEL``, then falls back to INFO."""

    if level is None:
        level = os.getenv(LEVEL_ENV_VAR) or logging.INFO
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    known = logging.getLevelNamesMapping()
    if name not in known:
        raise ValueError(f"unknown log level: {name!r}")
    return known[name]


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``n26_hledger`` records to ``stream`` (default: stderr).

    Only the first call has an effect. ``level`` accepts a number or a level
    name; an unknown name raises ``ValueError``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = _parse_level(level)
    handler: logging.Handler = (
        _StderrHandler() if stream is None else logging.StreamHandler(stream)
    )
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.handlers = [h for h in pkg.handlers if not isinstance(h, logging.NullHandler)]
    pkg.addHandler(handler)
    pkg.setLevel(resolved)
    pkg.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not (_CONFIGURED or pkg.handlers):
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
