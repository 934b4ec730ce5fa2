"""Inline scanner shared by the span renderer and the width counter.

Both consumers walk the same segment stream, which is what keeps the
measured width of a line equal to the number of characters the renderer
prints for it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple

CODE_DELIMITER = "`"
MARKERS = "*_"
ESCAPE = "\\"
ESCAPABLE = CODE_DELIMITER + MARKERS

# Longest marker window handled as a single toggle event
MAX_MARKER_WINDOW = 3


class SegmentKind(Enum):
    TEXT = "text"
    CODE = "code"
    MARKER = "marker"


class Segment(NamedTuple):
    """One unit of inline content.

    ``text`` is the literal text for TEXT, the interior of the span for CODE,
    and the consumed marker window (1-3 identical characters) for MARKER.
    """

    kind: SegmentKind
    text: str


def marker_windows(run_length: int) -> list[int]:
    """Split a marker run into the capped windows it is consumed in.

    >>> marker_windows(5)
    [3, 2]
    """
    windows: list[int] = []
    remaining = run_length
    while remaining > 0:
        window = min(MAX_MARKER_WINDOW, remaining)
        windows.append(window)
        remaining -= window
    return windows


def scan_inline(text: str) -> Iterator[Segment]:
    """Split a single line into TEXT, CODE and MARKER segments.

    Single left-to-right pass with no backtracking:

    * A backtick opens a code span only if another backtick follows on the
      same line; otherwise it is literal text.
    * A run of ``*`` or ``_`` yields one MARKER segment per capped window.
    * A backslash before a backtick or marker makes that character literal.
    """
    buf: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == ESCAPE and i + 1 < n and text[i + 1] in ESCAPABLE:
            buf.append(text[i + 1])
            i += 2
            continue

        if ch == CODE_DELIMITER:
            close = text.find(CODE_DELIMITER, i + 1)
            if close == -1:
                # Unmatched: literal backtick
                buf.append(ch)
                i += 1
                continue
            if buf:
                yield Segment(SegmentKind.TEXT, "".join(buf))
                buf = []
            yield Segment(SegmentKind.CODE, text[i + 1 : close])
            i = close + 1
            continue

        if ch in MARKERS:
            end = i
            while end < n and text[end] == ch:
                end += 1
            if buf:
                yield Segment(SegmentKind.TEXT, "".join(buf))
                buf = []
            for window in marker_windows(end - i):
                yield Segment(SegmentKind.MARKER, ch * window)
            i = end
            continue

        buf.append(ch)
        i += 1

    if buf:
        yield Segment(SegmentKind.TEXT, "".join(buf))
