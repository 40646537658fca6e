"""Error taxonomy for logchannel.

Configuration mistakes that should stop a caller (binding something that is
not a sink, a broken routing profile) raise.  Re-creating an existing channel
only warns.  Errors raised by a sink's ``accept`` are never wrapped: they
reach the code that emitted the message exactly as the sink raised them.
"""

from __future__ import annotations


class ChannelError(Exception):
    """Base class for every error raised by logchannel itself."""


class InvalidSinkError(ChannelError, TypeError):
    """Raised when an object bound to a channel has no callable ``accept``."""

    def __init__(self, sink: object, position: int | None = None) -> None:
        self.sink = sink
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Expected a sink with an accept(level, message) method{where}, "
            f"got {type(sink).__name__}: {sink!r}"
        )


class ProfileError(ChannelError):
    """Raised when a routing profile cannot be loaded or applied."""


class SettingsError(ChannelError):
    """Raised by the CLI when ``LOGCHANNEL_*`` settings fail validation."""


class DuplicateChannelWarning(UserWarning):
    """Issued when a channel is created for a topic that already has one.

    The new channel replaces the old entry in the registry.  Handles that
    were handed out earlier keep working because they read all of their
    configuration from the registry on every call.
    """
