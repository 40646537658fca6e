"""File sink — appends messages to a local file.

The file is opened lazily on the first message and stays open until
``close()``.  Channels never close sinks, so the code that created a
``FileSink`` is responsible for closing it, typically with ``with``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


class FileSink:
    """Writes messages to a file.

    Parameters
    ----------
    path:
        Target file.  Parent directories are created on open.
    mode:
        ``"a"`` (default) appends, ``"w"`` truncates on open.
    encoding:
        Text encoding of the file.
    """

    def __init__(
        self,
        path: Path | str,
        mode: str = "a",
        encoding: str = "utf-8",
    ) -> None:
        if mode not in ("a", "w"):
            raise ValueError(f"FileSink mode must be 'a' or 'w', got {mode!r}")
        self._path = Path(path)
        self._mode = mode
        self._encoding = encoding
        self._handle: TextIO | None = None

    @property
    def sink_name(self) -> str:
        return f"file:{self._path}"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle is None

    def _open(self) -> TextIO:
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self._path.open(self._mode, encoding=self._encoding)
            logger.debug("FileSink: opened %s (mode=%s)", self._path, self._mode)
        return self._handle

    def accept(self, level: str, message: str) -> None:
        handle = self._open()
        handle.write(message)
        handle.flush()

    def close(self) -> None:
        """Close the underlying file.  A later message reopens it in append mode."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            self._mode = "a"
            logger.debug("FileSink: closed %s", self._path)

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
