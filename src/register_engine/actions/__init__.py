"""Register commands exposed to key bindings and embedding editors."""

from .registers import (
    CommandResult,
    RegisterContext,
    append_to_register,
    copy_rectangle_to_register,
    copy_to_register,
    frame_configuration_to_register,
    increment_register,
    insert_register,
    jump_to_register,
    list_registers,
    notify_source_destroyed,
    number_to_register,
    point_to_register,
    prepend_to_register,
    track_source_destruction,
    view_register,
    window_configuration_to_register,
)
from .commands import RegisterRequest
from .reader import RegisterCommandReader

__all__ = [
    "CommandResult",
    "RegisterContext",
    "RegisterRequest",
    "RegisterCommandReader",
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
    "track_source_destruction",
]
