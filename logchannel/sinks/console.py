"""Rich console sink — styled terminal output.

Messages are printed through a ``rich.console.Console`` with a style chosen
from the channel's priority label.  Rich markup inside messages is not
interpreted, so arbitrary text is safe to log.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from logchannel.models.priority import Priority

# ---------------------------------------------------------------------------
# Priority -> Rich style mapping
# ---------------------------------------------------------------------------

_PRIORITY_STYLES: dict[str, str] = {
    Priority.EMERG.value: "bold white on red",
    Priority.ALERT.value: "bold red",
    Priority.CRIT.value: "bold red",
    Priority.FATAL.value: "bold red",
    Priority.ERR.value: "red",
    Priority.ERROR.value: "red",
    Priority.WARNING.value: "yellow",
    Priority.WARN.value: "yellow",
    Priority.NOTICE.value: "cyan",
    Priority.INFO.value: "",
    Priority.DEBUG.value: "dim",
    Priority.TRACE.value: "dim",
}


class ConsoleSink:
    """Prints messages to a Rich console.

    Parameters
    ----------
    console:
        Rich Console instance.  A stderr console is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    @property
    def sink_name(self) -> str:
        return "console"

    def style_for(self, level: str) -> str:
        return _PRIORITY_STYLES.get(str(level).lower(), "")

    def accept(self, level: str, message: str) -> None:
        self.console.print(
            Text(message, style=self.style_for(level)),
            end="",
            soft_wrap=True,
            highlight=False,
        )
