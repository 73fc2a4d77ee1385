"""Register commands invoked by key bindings or an embedding editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from register_engine.registers import (
    FrameLayout,
    MarkerRef,
    Rectangle,
    RegisterDispatcher,
    RegisterHost,
    RegisterStore,
    WindowLayout,
    append_text,
    increment,
    make_register,
    prepend_text,
    store_number,
    swap_out_on_source_destroyed,
)
from register_engine.runtime import telemetry
from register_engine.runtime.config import RegisterSettings, load_settings


@dataclass(slots=True)
class CommandResult:
    """Outcome of a register command, shaped for a status line."""

    status: str
    key: Optional[Hashable] = None
    message: Optional[str] = None
    payload: Any = None


@dataclass(slots=True)
class RegisterContext:
    """Shared services every register command can access."""

    store: RegisterStore
    host: RegisterHost
    settings: RegisterSettings = field(default_factory=RegisterSettings)
    dispatcher: RegisterDispatcher = field(init=False)

    def __post_init__(self) -> None:
        self.dispatcher = RegisterDispatcher(
            self.host, settings=self.settings, logger_name=self.store.logger_name
        )

    @classmethod
    def create(
        cls,
        host: RegisterHost,
        *,
        store: Optional[RegisterStore] = None,
        settings: Optional[RegisterSettings] = None,
    ) -> "RegisterContext":
        return cls(
            store=store or RegisterStore(logger_name="register_engine.registers"),
            host=host,
            settings=settings or load_settings(),
        )


def _command(context: RegisterContext, name: str, key: Hashable | None = None):
    return telemetry.span(
        f"command::{name}",
        logger_name=context.store.logger_name,
        component="commands",
        metadata={"key": key} if key is not None else None,
    )


def point_to_register(
    context: RegisterContext, key: Hashable, *, frame: bool = False
) -> CommandResult:
    if frame:
        return frame_configuration_to_register(context, key)
    with _command(context, "point_to_register", key):
        make_register(context.store, key, MarkerRef(context.host.current_marker()))
    return CommandResult(status="stored", key=key, message="point")


def window_configuration_to_register(
    context: RegisterContext, key: Hashable
) -> CommandResult:
    with _command(context, "window_configuration_to_register", key):
        value = WindowLayout(
            layout=context.host.current_window_layout(),
            position=context.host.current_marker(),
        )
        make_register(context.store, key, value)
    return CommandResult(status="stored", key=key, message="window configuration")


def frame_configuration_to_register(
    context: RegisterContext, key: Hashable
) -> CommandResult:
    with _command(context, "frame_configuration_to_register", key):
        value = FrameLayout(
            layout=context.host.current_frame_layout(),
            position=context.host.current_marker(),
        )
        make_register(context.store, key, value)
    return CommandResult(status="stored", key=key, message="frame configuration")


def copy_to_register(
    context: RegisterContext,
    key: Hashable,
    start: int,
    end: int,
    *,
    delete: bool = False,
) -> CommandResult:
    with _command(context, "copy_to_register", key):
        text = context.host.region_text(start, end)
        make_register(context.store, key, text)
        if delete:
            context.host.delete_region(start, end)
    return CommandResult(status="stored", key=key, payload=text)


def copy_rectangle_to_register(
    context: RegisterContext,
    key: Hashable,
    start: int,
    end: int,
    *,
    delete: bool = False,
) -> CommandResult:
    with _command(context, "copy_rectangle_to_register", key):
        lines = context.host.extract_rectangle(start, end, delete)
        value = Rectangle.from_lines(lines)
        make_register(context.store, key, value)
    return CommandResult(status="stored", key=key, payload=value.lines)


def number_to_register(
    context: RegisterContext, key: Hashable, number: Optional[int] = None
) -> CommandResult:
    """Store ``number``, or the number written at point when none is given."""

    with _command(context, "number_to_register", key):
        register = store_number(
            context.store, key, number, scan=context.host.scan_number_at_point
        )
    return CommandResult(status="stored", key=key, payload=register.value)


def increment_register(
    context: RegisterContext, key: Hashable, delta: int = 1
) -> CommandResult:
    with _command(context, "increment_register", key):
        register = increment(context.store, key, delta)
    return CommandResult(status="incremented", key=key, payload=register.value)


def _separator(context: RegisterContext) -> Optional[str]:
    separator_key = context.settings.separator_register
    if separator_key is None:
        return None
    register = context.store.get(separator_key)
    if register is None or not isinstance(register.value, str):
        return None
    return register.value


def append_to_register(
    context: RegisterContext,
    key: Hashable,
    start: int,
    end: int,
    *,
    delete: bool = False,
) -> CommandResult:
    with _command(context, "append_to_register", key):
        text = context.host.region_text(start, end)
        register = append_text(
            context.store, key, text, separator=_separator(context)
        )
        if delete:
            context.host.delete_region(start, end)
    return CommandResult(status="appended", key=key, payload=register.value)


def prepend_to_register(
    context: RegisterContext,
    key: Hashable,
    start: int,
    end: int,
    *,
    delete: bool = False,
) -> CommandResult:
    with _command(context, "prepend_to_register", key):
        text = context.host.region_text(start, end)
        register = prepend_text(
            context.store, key, text, separator=_separator(context)
        )
        if delete:
            context.host.delete_region(start, end)
    return CommandResult(status="prepended", key=key, payload=register.value)


def jump_to_register(
    context: RegisterContext, key: Hashable, *, delete: bool = False
) -> CommandResult:
    """Restore the position or layout in register ``key``.

    With ``delete``, restoring a frame layout removes frames created since.
    """

    with _command(context, "jump_to_register", key):
        register = context.store.get_or_fail(key)
        context.dispatcher.restore(register, delete=delete)
    return CommandResult(status="jumped", key=key)


def insert_register(
    context: RegisterContext, key: Hashable, *, point_after: bool = False
) -> CommandResult:
    """Insert register ``key`` at point.

    Point ends up before the inserted text unless ``point_after`` is set.
    """

    with _command(context, "insert_register", key):
        register = context.store.get_or_fail(key)
        start = context.host.current_position()
        payload = context.dispatcher.insert(register)
        if not point_after:
            context.host.goto_position(start)
    return CommandResult(status="inserted", key=key, payload=payload)


def view_register(context: RegisterContext, key: Hashable) -> CommandResult:
    with _command(context, "view_register", key):
        register = context.store.get_or_fail(key)
        description = context.dispatcher.describe(register, verbose=True)
    return CommandResult(
        status="viewed", key=key, message=f"Register {key} contains {description}"
    )


def list_registers(
    context: RegisterContext, *, verbose: Optional[bool] = None
) -> CommandResult:
    """Describe every register, one entry per key in ascending order."""

    detailed = context.settings.list_verbose if verbose is None else verbose
    with _command(context, "list_registers"):
        lines = [
            f"Register {register.key} contains "
            + context.dispatcher.describe(register, verbose=detailed)
            for register in context.store.iter_sorted()
        ]
    return CommandResult(
        status="listed", message="\n".join(lines), payload=len(lines)
    )


def notify_source_destroyed(
    context: RegisterContext, source: Any, path: Optional[str]
) -> CommandResult:
    swapped = swap_out_on_source_destroyed(context.store, context.host, source, path)
    return CommandResult(status="swapped_out", payload=swapped)


def track_source_destruction(context: RegisterContext, host: Any) -> None:
    """Subscribe to ``host.on_kill`` so dying buffers get swapped out first."""

    def _on_kill(source: Any) -> None:
        notify_source_destroyed(context, source, getattr(source, "file_path", None))

    host.on_kill(_on_kill)


__all__ = [
    "track_source_destruction",
    "CommandResult",
    "RegisterContext",
    "point_to_register",
    "window_configuration_to_register",
    "frame_configuration_to_register",
    "copy_to_register",
    "copy_rectangle_to_register",
    "number_to_register",
    "increment_register",
    "append_to_register",
    "prepend_to_register",
    "jump_to_register",
    "insert_register",
    "view_register",
    "list_registers",
    "notify_source_destroyed",
]
