"""Topic naming and namespace resolution.

A topic is a plain string key, conventionally ``<namespace>::<label>``.  The
namespace is normally the dotted module name of the code that owns the
channel.  Callers may always pass it explicitly; when they do not, it is
taken from the ``__name__`` global of the calling frame.
"""

from __future__ import annotations

import sys

TOPIC_SEPARATOR = "::"
DEFAULT_NAMESPACE = "__main__"


def make_topic(namespace: str, label: str | None = None) -> str:
    """Join *namespace* and an optional *label* into a topic.

    >>> make_topic("myapp.db")
    'myapp.db'
    >>> make_topic("myapp.db", "queries")
    'myapp.db::queries'
    """
    if label:
        return f"{namespace}{TOPIC_SEPARATOR}{label}"
    return namespace


def qualify(topic: str, namespace: str | None = None) -> str:
    """Prefix a bare *topic* with *namespace*.

    Topics that already contain the separator, and any topic when no
    namespace is given, are returned unchanged.

    >>> qualify("queries", "myapp.db")
    'myapp.db::queries'
    >>> qualify("other::queries", "myapp.db")
    'other::queries'
    >>> qualify("queries")
    'queries'
    """
    if namespace and TOPIC_SEPARATOR not in topic:
        return make_topic(namespace, topic)
    return topic


def caller_namespace(depth: int = 1) -> str:
    """Return the module name of the frame *depth* levels above the caller.

    ``depth=1`` is the function that called ``caller_namespace``'s caller,
    i.e. the code that invoked the public API function doing the lookup.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return DEFAULT_NAMESPACE
    return frame.f_globals.get("__name__") or DEFAULT_NAMESPACE
