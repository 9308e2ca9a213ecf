"""Logging for the ``multicomplex`` package hierarchy.

Modules take their logger from :func:`get_logger` and never ``print()``.
The CLI calls :func:`configure` with the level and file from its config;
otherwise the hierarchy configures itself on first use from the environment:

    MULTICOMPLEX_LOG_LEVEL  - level name or number (default INFO)
    MULTICOMPLEX_LOG_FILE   - optional path; appends plain-text log lines
"""

import logging
import os
import sys

ROOT_NAME = "multicomplex"
DEFAULT_LEVEL = logging.INFO

_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# ANSI line colours, TTY only
_LINE_COLORS = {
    logging.DEBUG: "\033[2m",       # dim
    logging.WARNING: "\033[33m",    # yellow
    logging.ERROR: "\033[31m",      # red
    logging.CRITICAL: "\033[1;31m", # bold red
}
_RESET = "\033[0m"

_installed = []
_configured = False


class _ConsoleFormatter(logging.Formatter):
    """Colours whole lines by level; INFO stays plain."""

    def __init__(self, fmt: str, color: bool = False):
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        prefix = _LINE_COLORS.get(record.levelno) if self.color else None
        return f"{prefix}{line}{_RESET}" if prefix else line


def _resolve_level(level):
    """Returns ``(levelno, known)`` for a level name, number or ``None``."""
    if level is None:
        return DEFAULT_LEVEL, True
    if isinstance(level, int):
        return level, True
    name = str(level).strip().upper()
    if name.isdigit():
        return int(name), True
    levelno = logging.getLevelName(name)
    if isinstance(levelno, int):
        return levelno, True
    return DEFAULT_LEVEL, False


def configure(level=None, log_file=None) -> logging.Logger:
    """Installs handlers on the ``multicomplex`` root logger.

    Handlers from an earlier call are closed and replaced, so the CLI can
    reconfigure between runs without duplicating output.

    Args:
        level: Level name or number. Falls back to ``MULTICOMPLEX_LOG_LEVEL``,
            then INFO. An unknown name logs a warning and uses INFO.
        log_file: Optional path for an append-mode plain-text log. Falls
            back to ``MULTICOMPLEX_LOG_FILE``.

    Returns:
        The ``multicomplex`` root logger.
    """
    global _configured
    root = logging.getLogger(ROOT_NAME)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    if level is None:
        level = os.environ.get("MULTICOMPLEX_LOG_LEVEL")
    levelno, known = _resolve_level(level)
    root.setLevel(levelno)

    # stderr, so tqdm bars on stderr interleave cleanly
    console = logging.StreamHandler(sys.stderr)
    is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console.setFormatter(_ConsoleFormatter(_CONSOLE_FORMAT, color=is_tty))
    _installed.append(console)

    log_file = log_file or os.environ.get("MULTICOMPLEX_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(_FILE_FORMAT))
        _installed.append(fh)

    for handler in _installed:
        root.addHandler(handler)
    _configured = True

    if not known:
        root.warning("Unknown log level %r, using %s",
                     level, logging.getLevelName(DEFAULT_LEVEL))
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``multicomplex`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    if not _configured:
        configure()
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")
