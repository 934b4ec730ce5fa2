"""mdcat: render a small Markdown dialect to styled terminal text."""

from mdcat.ansi import Styler, strip_ansi
from mdcat.blocks import Block, BlockKind, FenceTracker, classify_line
from mdcat.config import MarkdownTheme, RenderConfig
from mdcat.inline import SpanState, render_inline, span_transitions
from mdcat.renderer import MarkdownRenderer, render_markdown
from mdcat.source import LineSource
from mdcat.table import Alignment, Table, render_table, split_row
from mdcat.width import visible_width

__all__ = [
    # Blocks
    "Block",
    "BlockKind",
    "FenceTracker",
    "classify_line",
    # Configuration
    "MarkdownTheme",
    "RenderConfig",
    "Styler",
    # Inline
    "SpanState",
    "render_inline",
    "span_transitions",
    "strip_ansi",
    "visible_width",
    # Rendering
    "LineSource",
    "MarkdownRenderer",
    "render_markdown",
    # Tables
    "Alignment",
    "Table",
    "render_table",
    "split_row",
]
