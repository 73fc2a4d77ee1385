"""A small in-memory editor that satisfies ``RegisterHost``.

It keeps named buffers, a list of frames each showing some windows, and a
dictionary standing in for the file system. Embedding applications provide
their own host; this one backs the test suite and quick experiments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from register_engine.runtime import telemetry

from .buffer import Buffer, Marker

ConfirmFunc = Callable[[str], bool]
KillHook = Callable[[Buffer], None]


@dataclass(frozen=True, slots=True)
class WindowSnapshot:
    windows: tuple[str, ...]
    selected: str


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    frames: tuple[WindowSnapshot, ...]
    selected_frame: int


def _always_confirm(path: str) -> bool:
    del path
    return True


class Workspace:
    def __init__(
        self,
        *,
        files: Optional[Mapping[str, str]] = None,
        confirm: ConfirmFunc = _always_confirm,
    ) -> None:
        self.files: Dict[str, str] = dict(files or {})
        self.buffers: Dict[str, Buffer] = {}
        self._confirm = confirm
        self._kill_hooks: List[KillHook] = []
        scratch = self.create_buffer("*scratch*")
        self.current: Buffer = scratch
        self.frames: List[List[str]] = [[scratch.name]]
        self.selected_frame = 0

    # -- buffer management -------------------------------------------------

    def create_buffer(
        self, name: str, text: str = "", *, file_path: Optional[str] = None
    ) -> Buffer:
        if name in self.buffers:
            raise ValueError(f"Buffer '{name}' already exists")
        buffer = Buffer(name=name, text=text, file_path=file_path)
        self.buffers[name] = buffer
        return buffer

    def on_kill(self, hook: KillHook) -> None:
        self._kill_hooks.append(hook)

    def kill_buffer(self, name: str) -> None:
        buffer = self.buffers.pop(name)
        for hook in self._kill_hooks:
            hook(buffer)
        buffer.kill()
        telemetry.record_event("workspace.kill_buffer", data={"buffer": name})
        for windows in self.frames:
            windows[:] = [window for window in windows if window != name]
        if self.current is buffer:
            fallback = next(iter(self.buffers.values()), None)
            if fallback is None:
                fallback = self.create_buffer("*scratch*")
            self.current = fallback
        for windows in self.frames:
            if not windows:
                windows.append(self.current.name)

    def display(self, name: str) -> None:
        """Split the selected frame to also show buffer ``name``."""

        self.frames[self.selected_frame].append(self.buffers[name].name)

    def make_frame(self) -> int:
        self.frames.append([self.current.name])
        self.selected_frame = len(self.frames) - 1
        return self.selected_frame

    # -- RegisterHost ------------------------------------------------------

    def current_marker(self) -> Marker:
        return self.current.make_marker()

    def current_position(self) -> int:
        return self.current.point

    def current_window_layout(self) -> WindowSnapshot:
        return WindowSnapshot(
            windows=tuple(self.frames[self.selected_frame]),
            selected=self.current.name,
        )

    def current_frame_layout(self) -> FrameSnapshot:
        frames = tuple(
            WindowSnapshot(
                windows=tuple(windows),
                selected=self.current.name
                if index == self.selected_frame
                else windows[0],
            )
            for index, windows in enumerate(self.frames)
        )
        return FrameSnapshot(frames=frames, selected_frame=self.selected_frame)

    def apply_window_layout(self, layout: WindowSnapshot) -> None:
        windows = [name for name in layout.windows if name in self.buffers]
        self.frames[self.selected_frame] = windows or [self.current.name]
        if layout.selected in self.buffers:
            self.current = self.buffers[layout.selected]

    def apply_frame_layout(self, layout: FrameSnapshot, keep_extra: bool) -> None:
        restored = [
            [name for name in snapshot.windows if name in self.buffers]
            or [self.current.name]
            for snapshot in layout.frames
        ]
        if keep_extra:
            restored.extend(self.frames[len(restored):])
        self.frames = restored
        self.selected_frame = min(layout.selected_frame, len(restored) - 1)
        selected = layout.frames[layout.selected_frame].selected
        if selected in self.buffers:
            self.current = self.buffers[selected]

    def goto_position(self, position: int) -> None:
        self.current.goto(position)

    def switch_to_source(self, source: Buffer) -> None:
        self.current = source
        windows = self.frames[self.selected_frame]
        if source.name not in windows:
            windows[-1] = source.name

    def open_file(self, path: str) -> Buffer:
        buffer = self.find_open_source(path)
        if buffer is None:
            base = name = path.rsplit("/", 1)[-1] or path
            suffix = 2
            while name in self.buffers:
                name = f"{base}<{suffix}>"
                suffix += 1
            buffer = self.create_buffer(
                name, self.files.get(path, ""), file_path=path
            )
        self.switch_to_source(buffer)
        return buffer

    def find_open_source(self, path: str) -> Optional[Buffer]:
        for buffer in self.buffers.values():
            if buffer.file_path == path:
                return buffer
        return None

    def confirm_reopen(self, path: str) -> bool:
        return bool(self._confirm(path))

    def region_text(self, start: int, end: int) -> str:
        return self.current.region_text(start, end)

    def extract_rectangle(self, start: int, end: int, delete: bool) -> List[str]:
        return self.current.extract_rectangle(start, end, delete=delete)

    def delete_region(self, start: int, end: int) -> None:
        self.current.delete_region(start, end)

    def insert_text(self, text: str) -> None:
        self.current.insert(text)

    def insert_rectangle(self, lines: Sequence[str]) -> None:
        self.current.insert_rectangle(lines)

    def scan_number_at_point(self) -> Optional[int]:
        return self.current.scan_number_at_point()

    def marker_is_bound(self, marker: Marker) -> bool:
        return marker.buffer is not None and marker.buffer.live

    def marker_source(self, marker: Marker) -> Optional[Buffer]:
        return marker.buffer

    def marker_position(self, marker: Marker) -> int:
        return marker.position

    def source_name(self, source: Buffer) -> str:
        return source.name


__all__ = ["Workspace", "WindowSnapshot", "FrameSnapshot", "ConfirmFunc"]
