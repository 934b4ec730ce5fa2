"""ANSI styling vocabulary used by the renderer.

Every escape sequence the renderer produces comes from the constants below and
goes through a :class:`Styler`, so that a single flag decides whether any
styling reaches the output at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# SGR constants
# ---------------------------------------------------------------------------

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"

FG_RED = "\x1b[31m"
FG_GREEN = "\x1b[32m"
FG_YELLOW = "\x1b[33m"
FG_BLUE = "\x1b[34m"
FG_MAGENTA = "\x1b[35m"
FG_CYAN = "\x1b[36m"
FG_WHITE = "\x1b[37m"

# Inline code: dark grey cell, soft orange text
BG_CODE = "\x1b[48;5;236m"
FG_CODE = "\x1b[38;5;215m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove all SGR escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# Styler
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Styler:
    """Joins escape codes when styling is enabled, yields ``""`` otherwise."""

    enabled: bool = True

    def __call__(self, *codes: str) -> str:
        if not self.enabled:
            return ""
        return "".join(codes)

    def wrap(self, text: str, *codes: str) -> str:
        """Return *text* preceded by *codes* and followed by a reset."""
        if not self.enabled or not codes:
            return text
        return f"{''.join(codes)}{text}{RESET}"
