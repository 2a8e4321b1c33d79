"""
Runtime configuration.

Environment:
    GENUUID_LOG_LEVEL   logging level name (default WARNING)
    GENUUID_LOG_FILE    write the log to this file instead of stderr
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

LOG_LEVEL = os.environ.get("GENUUID_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.environ.get("GENUUID_LOG_FILE") or None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# pypdf warns about every xref it repairs; shown only at DEBUG.
LIBRARY_LOGGERS = ("pypdf",)

_configured = False


def resolve_level(name: Optional[str]) -> Optional[int]:
    """Numeric level for a level name, or None if logging doesn't know it."""
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else None


def setup_logging(level: Optional[str] = None,
                  log_file: Union[str, Path, None] = None) -> logging.Logger:
    """
    Attach a handler to the genuuid logger. Runs once per process.

    pypdf's logger shares the handler. An unknown level name falls back
    to WARNING. Later calls return the already configured logger untouched.
    """
    global _configured
    logger = logging.getLogger("genuuid")
    if _configured:
        return logger

    log_file = log_file or LOG_FILE
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        from rich.console import Console
        from rich.logging import RichHandler
        handler = RichHandler(console=Console(stderr=True), show_path=False)

    requested = level or LOG_LEVEL
    numeric = resolve_level(requested)

    logger.addHandler(handler)
    logger.setLevel(numeric if numeric is not None else logging.WARNING)

    for name in LIBRARY_LOGGERS:
        library = logging.getLogger(name)
        library.addHandler(handler)
        library.setLevel(logging.DEBUG if logger.level <= logging.DEBUG else logging.ERROR)
        library.propagate = False

    if numeric is None:
        logger.warning("unknown log level %r, using WARNING", requested)

    _configured = True
    return logger
