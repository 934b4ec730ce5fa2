"""Inline span renderer: bold, italic, bold+italic and inline code.

The emphasis state is a single value rather than independent bold/italic
flags. Opening one style while another is active replaces it, and a style
never survives past the end of the line.
"""

from __future__ import annotations

from enum import Enum

from mdcat.ansi import BOLD, ITALIC, RESET, Styler
from mdcat.config import MarkdownTheme
from mdcat.scan import SegmentKind, scan_inline


class SpanState(Enum):
    NONE = 0
    ITALIC = 1
    BOLD = 2
    BOLD_ITALIC = 3


# Marker window length -> the state it toggles
_WINDOW_STATES = {
    1: SpanState.ITALIC,
    2: SpanState.BOLD,
    3: SpanState.BOLD_ITALIC,
}

_OPEN_CODES: dict[SpanState, tuple[str, ...]] = {
    SpanState.NONE: (),
    SpanState.ITALIC: (ITALIC,),
    SpanState.BOLD: (BOLD,),
    SpanState.BOLD_ITALIC: (BOLD, ITALIC),
}


def toggle(state: SpanState, window: int) -> SpanState:
    """Apply one marker window of length *window* to *state*."""
    target = _WINDOW_STATES[window]
    if state is target:
        return SpanState.NONE
    return target


def span_transitions(text: str) -> list[SpanState]:
    """Return the state reached after each marker window in *text*."""
    state = SpanState.NONE
    states: list[SpanState] = []
    for segment in scan_inline(text):
        if segment.kind is SegmentKind.MARKER:
            state = toggle(state, len(segment.text))
            states.append(state)
    return states


def render_inline(
    text: str,
    styler: Styler | None = None,
    theme: MarkdownTheme | None = None,
    *,
    base: tuple[str, ...] = (),
) -> str:
    """Render one line of inline markdown to styled terminal text.

    Args:
        text: Line content, without the line terminator.
        styler: Decides whether escape codes are emitted (default: enabled).
        theme: Supplies the inline code colours.
        base: Codes of the enclosing block style, restored after every reset
            so that e.g. a heading keeps its colour after a code span.
    """
    style = styler or Styler()
    theme = theme or MarkdownTheme()

    parts: list[str] = []
    state = SpanState.NONE

    for segment in scan_inline(text):
        if segment.kind is SegmentKind.TEXT:
            parts.append(segment.text)
        elif segment.kind is SegmentKind.CODE:
            parts.append(style(theme.inline_code_bg, theme.inline_code_fg))
            parts.append(f" {segment.text} ")
            parts.append(style(RESET, *base, *_OPEN_CODES[state]))
        else:
            new_state = toggle(state, len(segment.text))
            if new_state is SpanState.NONE:
                parts.append(style(RESET, *base))
            else:
                parts.append(style(*_OPEN_CODES[new_state]))
            state = new_state

    if state is not SpanState.NONE:
        parts.append(style(RESET))

    return "".join(parts)
