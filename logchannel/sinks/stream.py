"""Stream sink — writes messages to an arbitrary text stream."""

from __future__ import annotations

from typing import TextIO


class StreamSink:
    """Writes each message verbatim to *stream*.

    Parameters
    ----------
    stream:
        Any object with ``write``; ``flush`` is called when present.
    name:
        Value reported by ``sink_name``.
    """

    def __init__(self, stream: TextIO, name: str = "stream") -> None:
        self._stream = stream
        self._name = name

    @property
    def sink_name(self) -> str:
        return self._name

    @property
    def stream(self) -> TextIO:
        return self._stream

    def accept(self, level: str, message: str) -> None:
        self._stream.write(message)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()
