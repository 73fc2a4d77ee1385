"""Services the register core borrows from the embedding editor."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class RegisterHost(Protocol):
    """Everything the core needs from the text surface, windows and files.

    Markers, sources and layouts are opaque handles owned by the host; the
    core only stores them and hands them back.
    """

    def current_marker(self) -> Any:
        """Return a new marker at point in the current source."""
        ...

    def current_position(self) -> int:
        ...

    def current_window_layout(self) -> Any:
        ...

    def current_frame_layout(self) -> Any:
        ...

    def apply_window_layout(self, layout: Any) -> None:
        ...

    def apply_frame_layout(self, layout: Any, keep_extra: bool) -> None:
        """Restore ``layout``; ``keep_extra`` keeps frames it does not mention."""
        ...

    def goto_position(self, position: int) -> None:
        ...

    def switch_to_source(self, source: Any) -> None:
        ...

    def open_file(self, path: str) -> Any:
        ...

    def find_open_source(self, path: str) -> Optional[Any]:
        ...

    def confirm_reopen(self, path: str) -> bool:
        """Block until the user answers whether ``path`` should be revisited."""
        ...

    def region_text(self, start: int, end: int) -> str:
        ...

    def extract_rectangle(self, start: int, end: int, delete: bool) -> Sequence[str]:
        ...

    def delete_region(self, start: int, end: int) -> None:
        ...

    def insert_text(self, text: str) -> None:
        ...

    def insert_rectangle(self, lines: Sequence[str]) -> None:
        ...

    def scan_number_at_point(self) -> Optional[int]:
        ...

    def marker_is_bound(self, marker: Any) -> bool:
        ...

    def marker_source(self, marker: Any) -> Any:
        ...

    def marker_position(self, marker: Any) -> int:
        ...

    def source_name(self, source: Any) -> str:
        ...


__all__ = ["RegisterHost"]
