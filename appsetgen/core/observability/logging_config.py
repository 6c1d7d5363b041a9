"""
Logging for the appsetgen CLI.

``setup_logging`` runs once per process, from ``cli()`` in main.py,
and installs the root handlers; library modules only ever call
``logging.getLogger(__name__)``.  Generators themselves never log:
failures reach the user through the generate use case.

The console level comes from ``--debug``/``--verbose``/``--quiet`` or
else ``Settings.log_level``; ``Settings.log_file`` adds a file handler
that can run at its own level.
"""

from __future__ import annotations

import logging
import sys

# Console formats grow with verbosity
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT_FORMAT: tuple[str, str | None] = ("%(message)s", None)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with appsetgen's.

    Args:
        level: Console level name, e.g. ``"INFO"``.
        log_file: Path of an extra log file, if any.
        log_file_level: Level for the file (default: ``level``).
    """
    console_level = parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        handlers.append(fh)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    # Handlers filter on their own; the root must pass the most verbose of them
    root.setLevel(min(h.level for h in handlers))

    logging.raiseExceptions = False


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_DEFAULT_FORMAT
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            fmt, datefmt = _CONSOLE_FORMATS[threshold]
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def parse_level(level: str | None) -> int:
    """Level name to number; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
