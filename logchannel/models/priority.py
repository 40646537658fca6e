"""Priority labels attached to channels.

A channel carries one priority label that every sink receives with each
message.  Labels are not validated: sinks decide what a label means.  The
enum lists the common vocabularies so code has names to refer to.

UNIX syslog: emerg, alert, crit, err, warning, notice, info, debug.
log4j adds: fatal, error, warn, trace.
"""

from __future__ import annotations

import logging
from enum import Enum

DEFAULT_PRIORITY = "info"


class Priority(str, Enum):
    """Well-known priority labels."""

    EMERG = "emerg"
    ALERT = "alert"
    CRIT = "crit"
    ERR = "err"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"
    # log4j spellings
    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    TRACE = "trace"


_LOGGING_LEVELS: dict[str, int] = {
    Priority.EMERG.value: logging.CRITICAL,
    Priority.ALERT.value: logging.CRITICAL,
    Priority.CRIT.value: logging.CRITICAL,
    Priority.FATAL.value: logging.CRITICAL,
    "critical": logging.CRITICAL,
    Priority.ERR.value: logging.ERROR,
    Priority.ERROR.value: logging.ERROR,
    Priority.WARNING.value: logging.WARNING,
    Priority.WARN.value: logging.WARNING,
    Priority.NOTICE.value: logging.INFO,
    Priority.INFO.value: logging.INFO,
    Priority.DEBUG.value: logging.DEBUG,
    Priority.TRACE.value: logging.DEBUG,
}


def to_logging_level(label: str) -> int:
    """Map a priority label to a stdlib ``logging`` level.

    Matching is case-insensitive.  Unknown labels map to ``logging.INFO``.

    >>> to_logging_level("err") == logging.ERROR
    True
    >>> to_logging_level("whatever") == logging.INFO
    True
    """
    return _LOGGING_LEVELS.get(str(label).lower(), logging.INFO)
