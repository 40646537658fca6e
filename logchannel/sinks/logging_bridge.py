"""Logging sink — forwards channel messages into stdlib ``logging``.

Lets a deployer route logchannel topics into an application's existing
logging configuration (handlers, formatters, syslog, ...).  The channel's
priority label picks the ``logging`` level.
"""

from __future__ import annotations

import logging

from logchannel.models.priority import to_logging_level


class LoggingSink:
    """Emits each message on a ``logging.Logger``.

    Parameters
    ----------
    logger:
        A ``logging.Logger`` or the name of one.
    strip_newline:
        Drop one trailing newline, since logging handlers add their own.
    """

    def __init__(
        self,
        logger: logging.Logger | str,
        *,
        strip_newline: bool = True,
    ) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger
        self._strip_newline = strip_newline

    @property
    def sink_name(self) -> str:
        return f"logging:{self._logger.name}"

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def accept(self, level: str, message: str) -> None:
        if self._strip_newline and message.endswith("\n"):
            message = message[:-1]
        self._logger.log(to_logging_level(level), "%s", message)
