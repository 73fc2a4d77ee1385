"""Register records and the tagged value kinds they can hold."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Hashable, Iterable, Optional

PrintFunc = Callable[[Any], str]
JumpFunc = Callable[[Any], object]
InsertFunc = Callable[[Any], object]


@dataclass(frozen=True, slots=True)
class FrameLayout:
    """Snapshot of every window in every frame plus the saved point marker."""

    layout: Any
    position: Any


@dataclass(frozen=True, slots=True)
class WindowLayout:
    """Snapshot of the selected frame's windows plus the saved point marker."""

    layout: Any
    position: Any


@dataclass(frozen=True, slots=True)
class MarkerRef:
    """Wraps a host marker so it is never mistaken for an arbitrary object."""

    marker: Any


@dataclass(frozen=True, slots=True)
class FileRef:
    path: str


@dataclass(frozen=True, slots=True)
class DeferredFileRef:
    """A position in a file whose buffer was killed; revisiting asks first."""

    path: str
    offset: int


@dataclass(frozen=True, slots=True)
class Rectangle:
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Rectangle":
        return cls(lines=tuple(lines))


@dataclass(frozen=True, slots=True)
class RegisterBehavior:
    """Optional per-register overrides; ``None`` means use the kind default."""

    print_func: Optional[PrintFunc] = None
    jump_func: Optional[JumpFunc] = None
    insert_func: Optional[InsertFunc] = None

    def __post_init__(self) -> None:
        for name in ("print_func", "jump_func", "insert_func"):
            func = getattr(self, name)
            if func is not None and not callable(func):
                raise TypeError(f"{name} must be callable")

    @property
    def is_default(self) -> bool:
        return (
            self.print_func is None
            and self.jump_func is None
            and self.insert_func is None
        )


DEFAULT_BEHAVIOR = RegisterBehavior()


@dataclass(frozen=True, slots=True)
class Register:
    """Immutable key/value pair; writes replace the record in the store."""

    key: Hashable
    value: Any
    behavior: RegisterBehavior = field(default=DEFAULT_BEHAVIOR)

    def with_value(self, value: Any) -> "Register":
        return replace(self, value=value)


__all__ = [
    "FrameLayout",
    "WindowLayout",
    "MarkerRef",
    "FileRef",
    "DeferredFileRef",
    "Rectangle",
    "RegisterBehavior",
    "DEFAULT_BEHAVIOR",
    "Register",
    "PrintFunc",
    "JumpFunc",
    "InsertFunc",
]
