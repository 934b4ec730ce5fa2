"""Pipe tables: row splitting, separator parsing, buffering and layout.

A table is rendered only once all of its rows are known, because each
column is as wide as its widest cell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from mdcat.ansi import BOLD, DIM, RESET, Styler
from mdcat.config import MarkdownTheme
from mdcat.inline import render_inline
from mdcat.source import LineSource
from mdcat.width import visible_width

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = "|"
MIN_COLUMN_WIDTH = 3

_SEPARATOR_CHARS = frozenset("-:")

# Box-drawing glyphs
_H = "\u2500"  # ─
_V = "\u2502"  # │


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def is_table_row(line: str) -> bool:
    return line.startswith(COLUMN_SEPARATOR)


def split_row(
    line: str,
    *,
    max_columns: int | None = None,
    max_cell_length: int | None = None,
) -> list[str]:
    """Split a pipe-delimited row into trimmed cells.

    An optional leading pipe is skipped and a trailing pipe closes the last
    cell. ``\\|`` is a literal pipe inside a cell. Cells past *max_columns*
    and text past *max_cell_length* are dropped.
    """
    text = line.rstrip()
    if text.startswith(COLUMN_SEPARATOR):
        text = text[1:]

    cells: list[str] = []
    current: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] == COLUMN_SEPARATOR:
            current.append(COLUMN_SEPARATOR)
            i += 2
            continue
        if ch == COLUMN_SEPARATOR:
            cells.append(_finish_cell(current, max_cell_length))
            current = []
        else:
            current.append(ch)
        i += 1
    if current:
        cells.append(_finish_cell(current, max_cell_length))

    if max_columns is not None and len(cells) > max_columns:
        logger.debug("Row has %d cells, keeping the first %d", len(cells), max_columns)
        del cells[max_columns:]
    return cells


def _finish_cell(chars: list[str], max_cell_length: int | None) -> str:
    cell = "".join(chars).strip(" ")
    if max_cell_length is not None:
        cell = cell[:max_cell_length]
    return cell


def parse_separator(
    line: str,
    num_columns: int,
    *,
    max_columns: int | None = None,
) -> list[Alignment] | None:
    """Parse a separator row such as ``| --- | :---: | ---: |``.

    Returns one alignment per column, or None when *line* is not a valid
    separator for a table of *num_columns* columns.
    """
    cells = split_row(line, max_columns=max_columns)
    if num_columns == 0 or len(cells) != num_columns:
        return None

    alignments: list[Alignment] = []
    for cell in cells:
        if not cell or not set(cell) <= _SEPARATOR_CHARS:
            return None
        left = cell.startswith(":")
        right = cell.endswith(":")
        if left and right:
            alignments.append(Alignment.CENTER)
        elif right:
            alignments.append(Alignment.RIGHT)
        else:
            alignments.append(Alignment.LEFT)
    return alignments


def collect_rows(
    source: LineSource,
    *,
    max_rows: int | None = None,
    max_columns: int | None = None,
    max_cell_length: int | None = None,
) -> list[list[str]]:
    """Consume body rows from *source* while they start with a pipe.

    The line that ends the table is left in *source* for the caller. Once
    *max_rows* rows are buffered no further line is consumed.
    """
    rows: list[list[str]] = []
    while True:
        line = source.peek()
        if line is None or not is_table_row(line):
            break
        if max_rows is not None and len(rows) >= max_rows:
            logger.debug("Table reached the %d row limit", max_rows)
            break
        next(source)
        rows.append(
            split_row(line, max_columns=max_columns, max_cell_length=max_cell_length)
        )
    return rows


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


@dataclass
class Table:
    """A header row, one alignment per column, and the body rows."""

    header: list[str]
    alignments: list[Alignment]
    rows: list[list[str]] = field(default_factory=list)

    @property
    def num_columns(self) -> int:
        return len(self.header)

    def column_widths(self) -> list[int]:
        """Widest visible cell per column, never below MIN_COLUMN_WIDTH."""
        widths: list[int] = []
        for col in range(self.num_columns):
            width = max(MIN_COLUMN_WIDTH, visible_width(self.header[col]))
            for row in self.rows:
                if col < len(row):
                    width = max(width, visible_width(row[col]))
            widths.append(width)
        return widths


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_table(
    table: Table,
    styler: Styler | None = None,
    theme: MarkdownTheme | None = None,
) -> list[str]:
    """Render *table* as bordered lines (without line terminators)."""
    style = styler or Styler()
    theme = theme or MarkdownTheme()
    widths = table.column_widths()

    lines = [_border(widths, "\u250c", "\u252c", "\u2510", style)]  # ┌ ┬ ┐
    lines.append(_render_row(table.header, table, widths, style, theme, header=True))
    lines.append(_border(widths, "\u251c", "\u253c", "\u2524", style))  # ├ ┼ ┤
    for row in table.rows:
        lines.append(_render_row(row, table, widths, style, theme))
    lines.append(_border(widths, "\u2514", "\u2534", "\u2518", style))  # └ ┴ ┘
    return lines


def _border(widths: list[int], left: str, mid: str, right: str, style: Styler) -> str:
    body = mid.join(_H * (w + 2) for w in widths)
    return style.wrap(f"{left}{body}{right}", DIM)


def _render_row(
    cells: list[str],
    table: Table,
    widths: list[int],
    style: Styler,
    theme: MarkdownTheme,
    *,
    header: bool = False,
) -> str:
    bar = style.wrap(_V, DIM)
    cell_codes = (BOLD, theme.table_header_color) if header else ()

    parts = [bar]
    for col, width in enumerate(widths):
        cell = cells[col] if col < len(cells) else ""
        parts.append(" ")
        parts.append(style(*cell_codes))
        parts.append(
            _align_cell(cell, width, table.alignments[col], style, theme, cell_codes)
        )
        if cell_codes:
            parts.append(style(RESET))
        parts.append(" ")
        parts.append(bar)
    return "".join(parts)


def _align_cell(
    cell: str,
    width: int,
    alignment: Alignment,
    style: Styler,
    theme: MarkdownTheme,
    base: tuple[str, ...],
) -> str:
    pad = max(0, width - visible_width(cell))
    if alignment is Alignment.CENTER:
        left = pad // 2
    elif alignment is Alignment.RIGHT:
        left = pad
    else:
        left = 0
    right = pad - left
    return " " * left + render_inline(cell, style, theme, base=base) + " " * right
