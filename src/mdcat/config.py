"""Rendering configuration and colour theme."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdcat.ansi import (
    BG_CODE,
    FG_CODE,
    FG_CYAN,
    FG_GREEN,
    FG_MAGENTA,
    FG_YELLOW,
    Styler,
)


@dataclass(frozen=True)
class MarkdownTheme:
    """Colour choices for each kind of block."""

    h1_color: str = FG_CYAN
    h2_color: str = FG_YELLOW
    heading_color: str = FG_MAGENTA  # levels 3-6
    rule_color: str = ""
    quote_color: str = FG_GREEN
    list_marker_color: str = FG_YELLOW
    table_header_color: str = FG_CYAN
    fence_tag_color: str = FG_GREEN
    code_fg: str = FG_CODE
    inline_code_bg: str = BG_CODE
    inline_code_fg: str = FG_CODE

    def heading(self, level: int) -> str:
        if level == 1:
            return self.h1_color
        if level == 2:
            return self.h2_color
        return self.heading_color


@dataclass(frozen=True)
class RenderConfig:
    """Immutable settings for one rendering run.

    The ``max_*`` limits truncate silently; ``None`` disables a limit.
    """

    color: bool = True
    theme: MarkdownTheme = field(default_factory=MarkdownTheme)
    rule_width: int = 60
    max_table_rows: int | None = 256
    max_columns: int | None = 16
    max_cell_length: int | None = 127

    def __post_init__(self) -> None:
        if self.rule_width < 0:
            raise ValueError(f"rule_width must be >= 0, got {self.rule_width}")
        for name in ("max_table_rows", "max_columns", "max_cell_length"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be a positive integer or None, got {value}")

    def styler(self) -> Styler:
        return Styler(self.color)
