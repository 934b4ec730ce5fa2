"""Line iterator with a single line of pushback."""

from __future__ import annotations

from typing import Iterable, Iterator


def strip_line_ending(line: str) -> str:
    """Drop one trailing ``\\n`` and a preceding ``\\r``, if present."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class LineSource:
    """Yields input lines and lets the caller look one line ahead.

    A line obtained with :meth:`peek` (or handed back with :meth:`push_back`)
    is returned, verbatim, by the next call to ``next()``. At most one line is
    ever held back.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: str | None = None

    def __iter__(self) -> LineSource:
        return self

    def __next__(self) -> str:
        if self._pending is not None:
            line = self._pending
            self._pending = None
            return line
        return strip_line_ending(next(self._lines))

    def peek(self) -> str | None:
        """Return the next line without consuming it, or None at end of input."""
        if self._pending is None:
            try:
                self._pending = strip_line_ending(next(self._lines))
            except StopIteration:
                return None
        return self._pending

    def push_back(self, line: str) -> None:
        """Re-queue *line* so that it is returned by the next ``next()``."""
        if self._pending is not None:
            raise RuntimeError("LineSource already holds a pending line")
        self._pending = line
