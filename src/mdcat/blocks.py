"""Line-level block classification and the fenced-code tracker.

:func:`classify_line` looks at a single line and decides its block kind in
fixed priority order. Tables need a line of lookahead, so a line that could
start one is reported as ``TABLE_CANDIDATE`` and the renderer decides.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mdcat.table import is_table_row

FENCE = "```"
RULE_CHARS = "-*="
MIN_RULE_LENGTH = 3
BULLET_CHARS = "-*+"
QUOTE_MARKER = ">"
HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 6


class BlockKind(Enum):
    FENCE = "fence"
    BLANK = "blank"
    RULE = "rule"
    TABLE_CANDIDATE = "table_candidate"
    HEADING = "heading"
    QUOTE = "quote"
    BULLET = "bullet"
    NUMBERED = "numbered"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    """A classified line.

    ``text`` is the inline content left after the block marker. ``level`` is
    the heading level. ``marker`` holds the item number of a numbered list or
    the language tag of a fence line.
    """

    kind: BlockKind
    text: str = ""
    level: int = 0
    marker: str = ""


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_fence(line: str) -> bool:
    return line.startswith(FENCE)


def is_rule(line: str) -> bool:
    """A line made of one repeated ``-``, ``*`` or ``=``, at least 3 long."""
    if len(line) < MIN_RULE_LENGTH or line[0] not in RULE_CHARS:
        return False
    return line.count(line[0]) == len(line)


def parse_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` for ``#`` to ``######`` followed by a space."""
    level = 0
    while level < len(line) and line[level] == HEADING_MARKER:
        level += 1
    if level == 0 or level > MAX_HEADING_LEVEL:
        return None
    if level >= len(line) or line[level] != " ":
        return None
    return level, line[level + 1 :]


def parse_quote(line: str) -> str | None:
    """Return the quoted text for ``> text`` or a bare ``>``."""
    if not line.startswith(QUOTE_MARKER):
        return None
    if len(line) == 1:
        return ""
    if line[1] != " ":
        return None
    return line[2:]


def parse_bullet(line: str) -> str | None:
    if len(line) >= 2 and line[0] in BULLET_CHARS and line[1] == " ":
        return line[2:]
    return None


def parse_numbered(line: str) -> tuple[str, str] | None:
    """Return ``(digits, text)`` for ``12. text``."""
    digits = 0
    while digits < len(line) and line[digits].isascii() and line[digits].isdigit():
        digits += 1
    if digits == 0 or not line.startswith(". ", digits):
        return None
    return line[:digits], line[digits + 2 :]


def classify_line(line: str) -> Block:
    """Classify *line*; the first matching kind wins."""
    if is_fence(line):
        return Block(BlockKind.FENCE, marker=line[len(FENCE) :].strip())
    if not line:
        return Block(BlockKind.BLANK)
    if is_rule(line):
        return Block(BlockKind.RULE)
    if is_table_row(line):
        return Block(BlockKind.TABLE_CANDIDATE, line)

    heading = parse_heading(line)
    if heading is not None:
        level, text = heading
        return Block(BlockKind.HEADING, text, level=level)

    quote = parse_quote(line)
    if quote is not None:
        return Block(BlockKind.QUOTE, quote)

    bullet = parse_bullet(line)
    if bullet is not None:
        return Block(BlockKind.BULLET, bullet)

    numbered = parse_numbered(line)
    if numbered is not None:
        digits, text = numbered
        return Block(BlockKind.NUMBERED, text, marker=digits)

    return Block(BlockKind.PARAGRAPH, line)


# ---------------------------------------------------------------------------
# Fence tracker
# ---------------------------------------------------------------------------


@dataclass
class FenceTracker:
    """Tracks whether the renderer is inside a fenced code block."""

    active: bool = False
    language: str = ""

    def toggle(self, language: str = "") -> bool:
        """Flip the fence state; return True if a block was just opened."""
        self.active = not self.active
        self.language = language if self.active else ""
        return self.active
