"""In-memory buffers with point, markers and rectangle editing."""

from __future__ import annotations

import re
import weakref
from typing import List, Optional, Sequence

from register_engine.runtime.telemetry import span

from .document import BufferDocument

_NUMBER_AT_POINT = re.compile(r"\s*(-?\d+)")


class Marker:
    """A position that follows edits in its buffer until the buffer dies."""

    __slots__ = ("_buffer", "position", "__weakref__")

    def __init__(self, buffer: "Buffer", position: int) -> None:
        self._buffer: Optional[Buffer] = buffer
        self.position = position

    @property
    def buffer(self) -> Optional["Buffer"]:
        return self._buffer

    def detach(self) -> None:
        self._buffer = None

    def __repr__(self) -> str:
        if self._buffer is None:
            return "<Marker in no buffer>"
        return f"<Marker at {self.position} in {self._buffer.name}>"


class Buffer:
    def __init__(
        self,
        *,
        name: str = "*scratch*",
        text: str = "",
        file_path: Optional[str] = None,
    ) -> None:
        self.name = name
        self.file_path = file_path
        self.document = BufferDocument.from_text(text)
        self.point = 0
        self.live = True
        self._markers: "weakref.WeakSet[Marker]" = weakref.WeakSet()

    @property
    def text(self) -> str:
        return self.document.text

    def goto(self, position: int) -> None:
        self.point = max(0, min(position, self.document.size))

    def make_marker(self, position: Optional[int] = None) -> Marker:
        pos = self.point if position is None else self.document.check_offset(position)
        marker = Marker(self, pos)
        self._markers.add(marker)
        return marker

    def region_text(self, start: int, end: int) -> str:
        start, end = sorted((start, end))
        self.document.check_offset(start)
        self.document.check_offset(end)
        return self.text[start:end]

    def insert(self, text: str) -> None:
        with span(
            "buffer::insert", component="buffer", metadata={"buffer": self.name}
        ):
            at = self.point
            self._splice_in(at, text)
            self.point = at + len(text)

    def delete_region(self, start: int, end: int) -> str:
        start, end = sorted((start, end))
        with span(
            "buffer::delete_region",
            component="buffer",
            metadata={"buffer": self.name},
        ):
            removed = self.region_text(start, end)
            self._splice_out(start, end)
            width = end - start
            if self.point >= end:
                self.point -= width
            elif self.point > start:
                self.point = start
            return removed

    def extract_rectangle(
        self, start: int, end: int, *, delete: bool = False
    ) -> List[str]:
        """Return the column block between two corners, padding short lines."""

        start, end = sorted((start, end))
        (top, left), (bottom, right) = (
            self.document.cursor_for_offset(start),
            self.document.cursor_for_offset(end),
        )
        left, right = sorted((left, right))
        block = [
            self.document.get_line(row)[left:right].ljust(right - left)
            for row in range(top, bottom + 1)
        ]
        if delete:
            with span(
                "buffer::delete_rectangle",
                component="buffer",
                metadata={"buffer": self.name},
            ):
                for row in range(top, bottom + 1):
                    line = self.document.get_line(row)
                    if left >= len(line):
                        continue
                    line_start = self.document.offset_for_cursor((row, 0))
                    self._splice_out(
                        line_start + left, line_start + min(right, len(line))
                    )
                self.point = self.document.offset_for_cursor((top, left))
        return block

    def insert_rectangle(self, block: Sequence[str]) -> None:
        """Insert ``block`` with its upper left corner at point."""

        if not block:
            return
        row, col = self.document.cursor_for_offset(self.point)
        with span(
            "buffer::insert_rectangle",
            component="buffer",
            metadata={"buffer": self.name},
        ):
            for index, piece in enumerate(block):
                target = row + index
                if target >= self.document.line_count:
                    self._splice_in(self.document.size, "\n")
                line = self.document.get_line(target)
                line_start = self.document.offset_for_cursor((target, 0))
                if len(line) < col:
                    self._splice_in(line_start + len(line), " " * (col - len(line)))
                self._splice_in(line_start + col, piece)
            self.point = self.document.offset_for_cursor(
                (row + len(block) - 1, col + len(block[-1]))
            )

    def scan_number_at_point(self) -> Optional[int]:
        match = _NUMBER_AT_POINT.match(self.text, self.point)
        if match is None:
            return None
        return int(match.group(1))

    def kill(self) -> None:
        for marker in list(self._markers):
            marker.detach()
        self._markers = weakref.WeakSet()
        self.live = False

    def _splice_in(self, at: int, text: str) -> None:
        # Markers sitting exactly at ``at`` stay before the new text.
        self.document = self.document.splice(at, at, text)
        for marker in self._markers:
            if marker.position > at:
                marker.position += len(text)

    def _splice_out(self, start: int, end: int) -> None:
        self.document = self.document.splice(start, end, "")
        width = end - start
        for marker in self._markers:
            if marker.position >= end:
                marker.position -= width
            elif marker.position > start:
                marker.position = start


__all__ = ["Buffer", "Marker"]
