"""Default transmitter — raw text to standard error.

Used for every channel that has no sinks bound.  Writes exactly what it is
given: no newline is appended.
"""

from __future__ import annotations

import sys


class StderrTransmitter:
    """Writes messages to ``sys.stderr``.

    ``sys.stderr`` is looked up on every write so that redirection done
    after the transmitter was created (``contextlib.redirect_stderr``,
    pytest's capture) is honoured.
    """

    @property
    def sink_name(self) -> str:
        return "stderr"

    def write(self, text: str) -> None:
        stream = sys.stderr
        stream.write(text)
        stream.flush()

    def accept(self, level: str, message: str) -> None:
        """Sink interface; the level is ignored."""
        self.write(message)
