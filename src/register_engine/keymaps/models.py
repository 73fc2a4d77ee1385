"""Dataclasses describing key sequences, register commands and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

_MODIFIER_PREFIXES = {"C": "ctrl", "M": "meta", "S": "shift", "s": "super"}
_MODIFIER_ORDER = ("ctrl", "meta", "shift", "super")
_PREFIX_FOR = {name: prefix for prefix, name in _MODIFIER_PREFIXES.items()}


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = {m.strip().lower() for m in modifiers if m.strip()}
    unknown = values.difference(_MODIFIER_ORDER)
    if unknown:
        raise ValueError(f"Unknown modifiers: {sorted(unknown)}")
    return tuple(name for name in _MODIFIER_ORDER if name in values)


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press, written the Emacs way (``C-x``, ``M-w``, ``SPC``)."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, text: str) -> "KeyStroke":
        parts = text.split("-")
        # "C--" is control-minus; "-" alone is the minus key.
        if text.endswith("--"):
            parts = parts[:-2] + ["-"]
        elif text == "-":
            parts = ["-"]
        *prefixes, key = parts
        modifiers = []
        for prefix in prefixes:
            if prefix not in _MODIFIER_PREFIXES:
                raise ValueError(f"Unknown modifier prefix '{prefix}' in '{text}'")
            modifiers.append(_MODIFIER_PREFIXES[prefix])
        return cls(key=key, modifiers=tuple(modifiers))

    @property
    def token(self) -> str:
        prefix = "".join(f"{_PREFIX_FOR[name]}-" for name in self.modifiers)
        return f"{prefix}{self.key}"


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable collection of keystrokes."""

    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def parse(cls, text: str) -> "KeySequence":
        """Parse ``"C-x r SPC"`` style notation."""

        return cls(strokes=tuple(KeyStroke.parse(part) for part in text.split()))


RegisterHandler = Callable[..., object]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A register command that a binding can invoke.

    ``reads_register`` marks commands that take the register key as the next
    keystroke after the binding; ``uses_region`` marks commands that need the
    active region's bounds.
    """

    id: str
    handler: RegisterHandler
    description: str = ""
    reads_register: bool = True
    uses_region: bool = False
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence with a register command."""

    id: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = [
    "KeyStroke",
    "KeySequence",
    "ActionRef",
    "Binding",
    "RegisterHandler",
]
