"""
Logging setup for the FlightHub API.

Every module logs through ``logging.getLogger(__name__)``; this module
decides where those records go.  ``setup_logging`` installs one console
handler (and, when ``LOG_FILE`` is set, a size-rotated file handler) on
the root logger and makes uvicorn's loggers propagate to it, so request
logs and application logs share a single format and destination.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

# Marks handlers installed here so a second call does not duplicate them.
_HANDLER_TAG = "_flighthub_handler"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _tagged(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Route application and server logs to the console and optional file.

    ``level`` is a level name such as ``"DEBUG"``; unknown names mean
    ``INFO``.  ``logfile`` is rotated at 5 MB, keeping three backups.
    Calling this more than once (tests build many apps) only updates
    the level.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, _HANDLER_TAG, False) for h in root.handlers):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    root.addHandler(_tagged(logging.StreamHandler(), formatter))
    if logfile:
        root.addHandler(
            _tagged(RotatingFileHandler(logfile, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"), formatter)
        )

    # uvicorn attaches its own handlers; hand its records to ours instead.
    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
