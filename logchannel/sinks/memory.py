"""Memory sink — buffers messages for later retrieval.

Useful in tests and for code that wants to inspect what a library logged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SinkRecord(BaseModel):
    """One message received by a ``MemorySink``."""

    model_config = ConfigDict(frozen=True)

    level: str
    message: str


class MemorySink:
    """Stores every accepted message in order.

    Call ``flush()`` to retrieve and clear the buffer.
    """

    def __init__(self, name: str = "memory") -> None:
        self._name = name
        self._records: list[SinkRecord] = []

    @property
    def sink_name(self) -> str:
        return self._name

    def accept(self, level: str, message: str) -> None:
        self._records.append(SinkRecord(level=level, message=message))

    @property
    def records(self) -> list[SinkRecord]:
        """Return a copy of the buffered records."""
        return list(self._records)

    @property
    def messages(self) -> list[str]:
        return [record.message for record in self._records]

    def flush(self) -> list[SinkRecord]:
        """Return and clear all buffered records."""
        records = list(self._records)
        self._records.clear()
        return records

    def __len__(self) -> int:
        return len(self._records)
