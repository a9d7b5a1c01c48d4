"""Literal tag scanning for ad hoc ``<name>...</name>`` payloads.

This is not an XML parser. A tag value is the text between the first open
marker and the first close marker after it. Nesting, attributes and escaping
are not recognised.
"""

from __future__ import annotations

from collections.abc import Iterator

TRIM_CHARS = " \t\n\r"


def as_text(payload: str | bytes) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


def markers(tag: str) -> tuple[str, str]:
    return f"<{tag}>", f"</{tag}>"


def trim(text: str) -> str:
    """Strip spaces, tabs, newlines and carriage returns from both ends."""
    return text.strip(TRIM_CHARS)


def find_span(text: str, tag: str, start: int = 0) -> tuple[int, int] | None:
    """Return the ``(begin, end)`` content span of the first tag at or after ``start``."""
    open_marker, close_marker = markers(tag)
    open_at = text.find(open_marker, start)
    if open_at < 0:
        return None
    begin = open_at + len(open_marker)
    end = text.find(close_marker, begin)
    if end < 0:
        return None
    return begin, end


def extract(payload: str | bytes, tag: str) -> str | None:
    """Return the trimmed content of the first ``tag``, or ``None`` if absent.

    An empty or whitespace-only element yields ``""``.
    """
    text = as_text(payload)
    span = find_span(text, tag)
    if span is None:
        return None
    begin, end = span
    return trim(text[begin:end])


def section(payload: str | bytes, tag: str) -> str | None:
    """Return the raw text between the first open and first close marker.

    Both markers are searched from the start of the payload. ``None`` is
    returned when either is missing or nothing lies between them.
    """
    text = as_text(payload)
    open_marker, close_marker = markers(tag)
    open_at = text.find(open_marker)
    close_at = text.find(close_marker)
    if open_at < 0 or close_at < 0:
        return None
    begin = open_at + len(open_marker)
    if close_at <= begin:
        return None
    return text[begin:close_at]


def iter_tag_values(payload: str | bytes, tag: str) -> Iterator[str]:
    """Yield trimmed values of successive ``tag`` elements in order.

    Elements with no content at all are skipped. Scanning stops at the first
    open marker that has no matching close marker.
    """
    text = as_text(payload)
    _, close_marker = markers(tag)
    cursor = 0
    while (span := find_span(text, tag, cursor)) is not None:
        begin, end = span
        if end > begin:
            yield trim(text[begin:end])
        cursor = end + len(close_marker)
