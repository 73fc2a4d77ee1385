"""List-of-lines text storage with offset/cursor conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

Cursor = Tuple[int, int]  # (row, column)


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-range position."""

    def __init__(self, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


@dataclass(slots=True)
class BufferDocument:
    """Text split into lines; every edit returns a new document."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def size(self) -> int:
        return sum(len(line) for line in self._lines) + len(self._lines) - 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def splice(self, start: int, end: int, text: str) -> "BufferDocument":
        """Return a document with offsets ``[start, end)`` replaced by ``text``."""

        self.check_offset(start)
        self.check_offset(end)
        current = self.text
        return BufferDocument.from_text(
            current[:start] + text + current[end:], version=self.version + 1
        )

    def check_offset(self, offset: int) -> int:
        if offset < 0 or offset > self.size:
            raise BufferValidationError("Position out of range", position=offset)
        return offset

    def cursor_for_offset(self, offset: int) -> Cursor:
        self.check_offset(offset)
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1  # newline
        return (len(self._lines) - 1, len(self._lines[-1]))

    def offset_for_cursor(self, cursor: Cursor) -> int:
        row, col = cursor
        offset = 0
        for i in range(row):
            offset += len(self._lines[i]) + 1
        return offset + col


__all__ = ["BufferDocument", "BufferValidationError", "Cursor"]
