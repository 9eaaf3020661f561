"""Logging setup for WordTreeLib.

The library itself only creates module loggers. Applications (the
``wordtracker`` command included) call ``configure_logging`` once to attach
handlers to the package logger. Handlers we install are tagged so a second
call can replace them without touching handlers added by anyone else.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .config import LoggingConfig, parse_level

PACKAGE_LOGGER = "wordtreelib"

_HANDLER_TAG_ATTR = "_wordtreelib_handler"
_CONFIGURED_FLAG_ATTR = "_wordtreelib_configured"


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually ``__name__``)."""
    return logging.getLogger(name)


def configure_logging(cfg: Optional[LoggingConfig] = None, *, force: bool = False) -> logging.Logger:
    """Attach console and file handlers to the package logger.

    Idempotent: later calls are ignored unless ``force`` is set.

    Args:
        cfg: Logging settings (defaults to LoggingConfig())
        force: Replace handlers installed by an earlier call

    Returns:
        The configured package logger
    """
    cfg = cfg or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)

    if getattr(logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return logger

    level = parse_level(cfg.level)
    logger.setLevel(level)
    _remove_our_handlers(logger)

    handlers: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        handlers.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(cfg)
        if fh is not None:
            handlers.append(fh)

    for handler in handlers:
        handler.setLevel(level)
        setattr(handler, _HANDLER_TAG_ATTR, True)
        logger.addHandler(handler)

    # Records already handled here; don't duplicate them on the root logger
    logger.propagate = not handlers
    setattr(logger, _CONFIGURED_FLAG_ATTR, True)
    return logger


def _create_rotating_file_handler(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Create the file handler, or None if the log file can't be opened."""
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{cfg.log_file}': {e}\n")
        return None
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return fh


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
