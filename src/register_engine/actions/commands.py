"""Interactive entry points: map a key-driven request onto register commands.

Every handler takes ``(context, request)``. ``request.prefix`` is the raw
prefix argument; commands read it the way the classic register commands do
(a number for ``number``/``increment``, a flag everywhere else).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

from . import registers as commands
from .registers import CommandResult, RegisterContext

Region = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class RegisterRequest:
    register: Optional[Hashable] = None
    region: Optional[Region] = None
    prefix: Optional[int] = None

    @property
    def flagged(self) -> bool:
        return self.prefix is not None

    def require_region(self) -> Region:
        if self.region is None:
            raise ValueError("The mark is not set now, so there is no region")
        return self.region


def point_to_register(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    return commands.point_to_register(
        context, request.register, frame=request.flagged
    )


def window_configuration_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    return commands.window_configuration_to_register(context, request.register)


def frame_configuration_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    return commands.frame_configuration_to_register(context, request.register)


def jump_to_register(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    return commands.jump_to_register(
        context, request.register, delete=request.flagged
    )


def copy_to_register(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    start, end = request.require_region()
    return commands.copy_to_register(
        context, request.register, start, end, delete=request.flagged
    )


def copy_rectangle_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    start, end = request.require_region()
    return commands.copy_rectangle_to_register(
        context, request.register, start, end, delete=request.flagged
    )


def append_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    start, end = request.require_region()
    return commands.append_to_register(
        context, request.register, start, end, delete=request.flagged
    )


def prepend_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    start, end = request.require_region()
    return commands.prepend_to_register(
        context, request.register, start, end, delete=request.flagged
    )


def insert_register(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    return commands.insert_register(
        context, request.register, point_after=request.flagged
    )


def number_to_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    return commands.number_to_register(context, request.register, request.prefix)


def increment_register(
    context: RegisterContext, request: RegisterRequest
) -> CommandResult:
    delta = 1 if request.prefix is None else request.prefix
    return commands.increment_register(context, request.register, delta)


def view_register(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    return commands.view_register(context, request.register)


def list_registers(context: RegisterContext, request: RegisterRequest) -> CommandResult:
    return commands.list_registers(context, verbose=request.flagged or None)


__all__ = [
    "Region",
    "RegisterRequest",
    "point_to_register",
    "window_configuration_to_register",
    "frame_configuration_to_register",
    "jump_to_register",
    "copy_to_register",
    "copy_rectangle_to_register",
    "append_to_register",
    "prepend_to_register",
    "insert_register",
    "number_to_register",
    "increment_register",
    "view_register",
    "list_registers",
]
