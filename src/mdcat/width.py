"""Visible width of markdown-bearing text.

Counts the columns :func:`mdcat.inline.render_inline` occupies for the same
text. Every codepoint counts as one column; wide (CJK) glyphs are not
special-cased.
"""

from __future__ import annotations

from mdcat.scan import SegmentKind, scan_inline

# Padding spaces printed around every inline code span
CODE_PADDING = 2


def visible_width(text: str) -> int:
    """Return the number of columns *text* occupies once rendered inline.

    * Marker windows (``*``, ``**``, ``***`` and the ``_`` forms) count 0.
    * A matched code span counts its interior plus the two padding spaces.
    * Everything else, an unmatched backtick included, counts 1 per codepoint.
    """
    if not text:
        return 0

    width = 0
    for segment in scan_inline(text):
        if segment.kind is SegmentKind.MARKER:
            continue
        width += len(segment.text)
        if segment.kind is SegmentKind.CODE:
            width += CODE_PADDING
    return width
