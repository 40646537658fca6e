"""Decoration rendering — turns a template plus channel state into a message.

A decoration is a plain string in which the keywords ``topic``,
``timestamp`` and ``context`` are replaced, each at most once and in that
order, by the channel's topic, the current local time and the channel's
context string.  If the result then contains ``text``, its first occurrence
becomes the message; otherwise the rendered decoration is a prefix.

Matching is literal substring matching.  A template such as
``"topical: "`` has its ``topic`` replaced too; pick punctuation around the
keywords accordingly.

Examples
--------
>>> render("app", "topic: text\\n", None, "hi")
'app: hi\\n'
>>> render("app", "[topic] ", None, "hi")
'[app] hi'
>>> render("app", None, None, "hi")
'hi'
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

KEYWORD_TOPIC = "topic"
KEYWORD_TIMESTAMP = "timestamp"
KEYWORD_CONTEXT = "context"
KEYWORD_TEXT = "text"


def join_parts(parts: Iterable[object]) -> str:
    """Concatenate message fragments with no separator."""
    return "".join(str(part) for part in parts)


def format_timestamp(now: datetime | None = None, fmt: str | None = None) -> str:
    """Render a local timestamp.

    Without *fmt* the ``ctime`` form is used, e.g. ``Thu Sep  9 21:46:40 1999``.
    """
    now = now or datetime.now()
    if fmt:
        return now.strftime(fmt)
    return now.ctime()


def render(
    topic: str,
    template: str | None,
    context: str | None,
    text: str,
    *,
    now: datetime | None = None,
    timestamp_format: str | None = None,
) -> str:
    """Build the final message string for one emission.

    Parameters
    ----------
    topic:
        Topic of the emitting channel.
    template:
        The channel's decoration.  ``None`` or ``""`` leaves *text* as is.
    context:
        The channel's context string; ``None`` renders as empty.
    text:
        The joined message fragments.
    now:
        Time to render for ``timestamp``; defaults to the current local time.
    timestamp_format:
        Optional ``strftime`` format for ``timestamp``.
    """
    if not template:
        return text

    rendered = template.replace(KEYWORD_TOPIC, topic, 1)
    if KEYWORD_TIMESTAMP in rendered:
        rendered = rendered.replace(
            KEYWORD_TIMESTAMP, format_timestamp(now, timestamp_format), 1
        )
    rendered = rendered.replace(KEYWORD_CONTEXT, context or "", 1)

    if KEYWORD_TEXT in rendered:
        return rendered.replace(KEYWORD_TEXT, text, 1)
    return rendered + text
