"""Logging setup shared by the CLI and the grid editor."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO, Union

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s",'
    '"line":%(lineno)d,"msg":"%(message)s"}'
)


def configure_logging(
    level: Union[str, int] = "WARNING",
    *,
    json: bool = False,
    logfile: str | Path | None = None,
    console: bool = True,
    stream: TextIO | None = None,
) -> None:
    """
    Replace the root handlers with the ones gridstar needs.

    Args:
        level: Level name or int; names are case-insensitive.
        json: Format records as JSON lines instead of plain text.
        logfile: Append records to this file; parent directories are created.
        console: Also write to ``stream`` (stderr by default, so ``--json``
            output on stdout stays parseable). The editor turns this off
            because stderr belongs to the Textual screen.
        stream: Console stream override.
    """
    formatter = logging.Formatter(JSON_FORMAT if json else TEXT_FORMAT)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in _build_handlers(logfile, console=console, stream=stream):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _build_handlers(
    logfile: str | Path | None, *, console: bool, stream: TextIO | None
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(stream or sys.stderr))
    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers
