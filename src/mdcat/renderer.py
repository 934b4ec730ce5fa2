"""Markdown renderer -- turns markdown lines into styled terminal output.

Single forward pass over the input with at most one line of lookahead,
used only to test whether a pipe-prefixed line is followed by a table
separator row. Output is produced line by line, except for tables, which are
buffered until every row is known.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from mdcat.ansi import BOLD, DIM, ITALIC, RESET, UNDERLINE
from mdcat.blocks import Block, BlockKind, FenceTracker, classify_line
from mdcat.config import RenderConfig
from mdcat.inline import render_inline
from mdcat.source import LineSource
from mdcat.table import (
    Table,
    collect_rows,
    is_table_row,
    parse_separator,
    render_table,
    split_row,
)
from mdcat.width import visible_width

logger = logging.getLogger(__name__)

_RULE = "\u2500"  # ─
_DOUBLE_RULE = "\u2550"  # ═
_QUOTE_BAR = "\u2502 "  # │
_BULLET = "\u2022 "  # •
_LIST_INDENT = "  "
_CODE_INDENT = "  "


class MarkdownRenderer:
    """Renders markdown lines to terminal text.

    The renderer holds no per-input state: every call to :meth:`render` gets
    a fresh fence state and lookahead buffer.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or RenderConfig()
        self._style = self._config.styler()
        self._theme = self._config.theme

    @property
    def config(self) -> RenderConfig:
        return self._config

    # -- main entry ---------------------------------------------------------

    def render(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield output chunks for *lines*.

        Each chunk ends with a newline, except for the single reset emitted
        when the input ends inside an unclosed code fence.
        """
        source = LineSource(lines)
        fence = FenceTracker()

        for line in source:
            block = classify_line(line)

            if block.kind is BlockKind.FENCE:
                yield self._render_fence(fence, block.marker)
                continue

            if fence.active:
                yield self._render_code_line(line)
                continue

            if block.kind is BlockKind.TABLE_CANDIDATE:
                table = self._read_table(line, source)
                if table is not None:
                    for table_line in render_table(table, self._style, self._theme):
                        yield table_line + "\n"
                    continue
                block = Block(BlockKind.PARAGRAPH, line)

            yield self._render_block(block)

        if fence.active:
            logger.debug("Input ended inside a code fence, closing it")
            reset = self._style(RESET)
            if reset:
                yield reset

    # -- tables -------------------------------------------------------------

    def _read_table(self, line: str, source: LineSource) -> Table | None:
        """Try to start a table at *line*.

        On rejection the lookahead line is pushed back into *source* and None
        is returned.
        """
        cfg = self._config
        lookahead = next(source, None)
        if lookahead is None:
            return None

        header = split_row(
            line, max_columns=cfg.max_columns, max_cell_length=cfg.max_cell_length
        )
        alignments = None
        if is_table_row(lookahead):
            alignments = parse_separator(
                lookahead, len(header), max_columns=cfg.max_columns
            )
        if alignments is None:
            logger.debug(
                "Not a table: %r is not a separator row for %d columns",
                lookahead,
                len(header),
            )
            source.push_back(lookahead)
            return None

        rows = collect_rows(
            source,
            max_rows=cfg.max_table_rows,
            max_columns=cfg.max_columns,
            max_cell_length=cfg.max_cell_length,
        )
        return Table(header, alignments, rows)

    # -- fenced code --------------------------------------------------------

    def _render_fence(self, fence: FenceTracker, language: str) -> str:
        style = self._style
        if fence.toggle(language):
            if fence.language:
                return f"{style(DIM, self._theme.fence_tag_color)}[{fence.language}]{style(RESET)}\n"
            return "\n"
        return style(RESET) + "\n"

    def _render_code_line(self, line: str) -> str:
        style = self._style
        return f"{style(self._theme.code_fg)}{_CODE_INDENT}{line}{style(RESET)}\n"

    # -- single-line blocks -------------------------------------------------

    def _render_block(self, block: Block) -> str:
        kind = block.kind
        if kind is BlockKind.BLANK:
            return "\n"
        if kind is BlockKind.RULE:
            return self._render_rule()
        if kind is BlockKind.HEADING:
            return self._render_heading(block.text, block.level)
        if kind is BlockKind.QUOTE:
            return self._render_quote(block.text)
        if kind is BlockKind.BULLET:
            return self._render_list_item(_BULLET, block.text)
        if kind is BlockKind.NUMBERED:
            return self._render_list_item(f"{block.marker}. ", block.text)
        return self._inline(block.text) + "\n"

    def _inline(self, text: str, *base: str) -> str:
        return render_inline(text, self._style, self._theme, base=base)

    def _render_rule(self) -> str:
        rule = _RULE * self._config.rule_width
        return f"{self._style(self._theme.rule_color, DIM)}{rule}{self._style(RESET)}\n"

    def _render_heading(self, text: str, level: int) -> str:
        style = self._style
        color = self._theme.heading(level)
        codes = (BOLD, color, UNDERLINE) if level == 1 else (BOLD, color)

        out = f"\n{style(*codes)}{self._inline(text, *codes)}{style(RESET)}\n"
        if level == 1:
            underline = _DOUBLE_RULE * (visible_width(text) + 2)
            out += f"{style(color, DIM)}{underline}{style(RESET)}\n"
        return out

    def _render_quote(self, text: str) -> str:
        style = self._style
        color = self._theme.quote_color
        bar = f"{style(color, DIM)}{_QUOTE_BAR}{style(RESET)}"
        return f"{bar}{style(ITALIC, color)}{self._inline(text, ITALIC, color)}{style(RESET)}\n"

    def _render_list_item(self, marker: str, text: str) -> str:
        style = self._style
        prefix = f"{_LIST_INDENT}{style(self._theme.list_marker_color, BOLD)}{marker}{style(RESET)}"
        return f"{prefix}{self._inline(text)}\n"


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------


def render_markdown(text: str, config: RenderConfig | None = None) -> str:
    """Render a whole markdown document held in memory."""
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(MarkdownRenderer(config).render(lines))
