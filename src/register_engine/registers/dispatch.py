"""Resolve how a register is printed, restored or inserted."""

from __future__ import annotations

from typing import Any, Optional

from register_engine.runtime.config import RegisterSettings
from register_engine.runtime.telemetry import span

from .classify import ValueKind, classify, describe
from .errors import AccessAborted, DeadReference, NoInsertableContent, NoRestoreTarget
from .host import RegisterHost
from .models import DeferredFileRef, FrameLayout, Register, WindowLayout


class RegisterDispatcher:
    """Applies a register's override, or the default for its value kind."""

    def __init__(
        self,
        host: RegisterHost,
        *,
        settings: Optional[RegisterSettings] = None,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or RegisterSettings()
        self._logger_name = logger_name

    def describe(self, register: Register, *, verbose: bool) -> str:
        if register.behavior.print_func is not None:
            return register.behavior.print_func(register.value)
        return describe(
            register.value,
            verbose=verbose,
            host=self.host,
            width=self.settings.terse_width,
        )

    def restore(self, register: Register, *, delete: bool = False) -> Any:
        """Move to whatever location the register remembers.

        ``delete`` only matters for frame layouts: frames created after the
        snapshot are dropped instead of kept.
        """

        with span(
            "registers::restore",
            logger_name=self._logger_name,
            component="registers",
            metadata={"key": register.key},
        ) as handle:
            if register.behavior.jump_func is not None:
                handle.add_metadata("override", True)
                return register.behavior.jump_func(register.value)

            value = register.value
            kind = classify(value)
            handle.add_metadata("kind", kind.value)
            if kind is ValueKind.FRAME_LAYOUT:
                self.host.apply_frame_layout(value.layout, keep_extra=not delete)
                self._goto_saved(register.key, value)
            elif kind is ValueKind.WINDOW_LAYOUT:
                self.host.apply_window_layout(value.layout)
                self._goto_saved(register.key, value)
            elif kind is ValueKind.MARKER:
                marker = value.marker
                if not self.host.marker_is_bound(marker):
                    raise DeadReference(register.key)
                self.host.switch_to_source(self.host.marker_source(marker))
                self.host.goto_position(self.host.marker_position(marker))
            elif kind is ValueKind.FILE:
                self.host.open_file(value.path)
            elif kind is ValueKind.DEFERRED_FILE:
                self._revisit(register.key, value)
            else:
                raise NoRestoreTarget(register.key, value)
            return None

    def insert(self, register: Register) -> Any:
        """Insert the register's contents at point and return what was inserted."""

        with span(
            "registers::insert",
            logger_name=self._logger_name,
            component="registers",
            metadata={"key": register.key},
        ) as handle:
            if register.behavior.insert_func is not None:
                handle.add_metadata("override", True)
                return register.behavior.insert_func(register.value)

            value = register.value
            kind = classify(value)
            handle.add_metadata("kind", kind.value)
            if kind is ValueKind.RECTANGLE:
                self.host.insert_rectangle(value.lines)
                return value.lines
            if kind is ValueKind.TEXT:
                payload = value
            elif kind is ValueKind.NUMBER:
                payload = str(value)
            elif kind is ValueKind.MARKER and self.host.marker_is_bound(value.marker):
                payload = str(self.host.marker_position(value.marker))
            else:
                raise NoInsertableContent(register.key, value)
            self.host.insert_text(payload)
            return payload

    def _goto_saved(self, key: Any, value: FrameLayout | WindowLayout) -> None:
        # The layout is already applied when the saved position turns out dead.
        marker = value.position
        if marker is None:
            return
        if not self.host.marker_is_bound(marker):
            raise DeadReference(key)
        self.host.goto_position(self.host.marker_position(marker))

    def _revisit(self, key: Any, value: DeferredFileRef) -> None:
        source = self.host.find_open_source(value.path)
        if source is not None:
            self.host.switch_to_source(source)
        else:
            if not self.host.confirm_reopen(value.path):
                raise AccessAborted(key, value.path)
            self.host.open_file(value.path)
        self.host.goto_position(value.offset)


__all__ = ["RegisterDispatcher"]
