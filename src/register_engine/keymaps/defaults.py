"""The built-in ``C-x r`` register keymap."""

from __future__ import annotations

from typing import Iterable, Sequence

from register_engine.actions import commands

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="register.point",
        handler=commands.point_to_register,
        description="Store point (or, with a prefix, the frame layout) in a register",
    ),
    ActionRef(
        id="register.window_configuration",
        handler=commands.window_configuration_to_register,
        description="Store the window configuration in a register",
    ),
    ActionRef(
        id="register.frame_configuration",
        handler=commands.frame_configuration_to_register,
        description="Store the frame configuration in a register",
    ),
    ActionRef(
        id="register.jump",
        handler=commands.jump_to_register,
        description="Jump to the position or configuration in a register",
    ),
    ActionRef(
        id="register.copy",
        handler=commands.copy_to_register,
        description="Copy the region into a register",
        uses_region=True,
    ),
    ActionRef(
        id="register.copy_rectangle",
        handler=commands.copy_rectangle_to_register,
        description="Copy the region-rectangle into a register",
        uses_region=True,
    ),
    ActionRef(
        id="register.append",
        handler=commands.append_to_register,
        description="Append the region to the text in a register",
        uses_region=True,
    ),
    ActionRef(
        id="register.prepend",
        handler=commands.prepend_to_register,
        description="Prepend the region to the text in a register",
        uses_region=True,
    ),
    ActionRef(
        id="register.insert",
        handler=commands.insert_register,
        description="Insert the contents of a register",
    ),
    ActionRef(
        id="register.number",
        handler=commands.number_to_register,
        description="Store a number in a register",
    ),
    ActionRef(
        id="register.increment",
        handler=commands.increment_register,
        description="Add the prefix argument to the number in a register",
    ),
    ActionRef(
        id="register.view",
        handler=commands.view_register,
        description="Describe the contents of a register",
    ),
    ActionRef(
        id="register.list",
        handler=commands.list_registers,
        description="Describe every register",
        reads_register=False,
    ),
)

_BINDING_TABLE: tuple[tuple[str, str, str], ...] = (
    ("C-x r C-SPC", "register.point", "point.ctrl_space"),
    ("C-x r C-@", "register.point", "point.ctrl_at"),
    ("C-x r SPC", "register.point", "point.space"),
    ("C-x r j", "register.jump", "jump"),
    ("C-x r s", "register.copy", "copy.s"),
    ("C-x r x", "register.copy", "copy.x"),
    ("C-x r i", "register.insert", "insert.i"),
    ("C-x r g", "register.insert", "insert.g"),
    ("C-x r r", "register.copy_rectangle", "copy_rectangle"),
    ("C-x r w", "register.window_configuration", "window_configuration"),
    ("C-x r f", "register.frame_configuration", "frame_configuration"),
    ("C-x r n", "register.number", "number"),
    ("C-x r +", "register.increment", "increment"),
    ("C-x r v", "register.view", "view"),
    ("C-x r l", "register.list", "list"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"register.{suffix}",
        sequence=KeySequence.parse(keys),
        action_id=action_id,
    )
    for keys, action_id, suffix in _BINDING_TABLE
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register every register command and the default ``C-x r`` bindings."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
