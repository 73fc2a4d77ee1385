"""Environment-driven settings shared by the dispatcher and command layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from .telemetry import env, env_flag

DEFAULT_TERSE_WIDTH = 20


@dataclass(frozen=True, slots=True)
class RegisterSettings:
    """Tunables for describing and composing registers.

    ``terse_width`` caps the text preview shown in terse listings. It is a
    fixed number rather than a function of any display width.
    ``separator_register`` names a register whose text is placed between
    pieces joined by append/prepend.
    """

    terse_width: int = DEFAULT_TERSE_WIDTH
    separator_register: Optional[Hashable] = None
    list_verbose: bool = False

    def __post_init__(self) -> None:
        if self.terse_width <= 0:
            raise ValueError("terse_width must be positive")


def load_settings() -> RegisterSettings:
    """Build settings from ``REGISTER_ENGINE_*`` environment variables."""

    raw_width = env("TERSE_WIDTH")
    try:
        width = int(raw_width) if raw_width else DEFAULT_TERSE_WIDTH
    except ValueError as exc:
        raise ValueError(
            f"REGISTER_ENGINE_TERSE_WIDTH must be an integer, got {raw_width!r}"
        ) from exc

    return RegisterSettings(
        terse_width=width,
        separator_register=env("SEPARATOR_REGISTER") or None,
        list_verbose=env_flag("LIST_VERBOSE", False),
    )


__all__ = ["DEFAULT_TERSE_WIDTH", "RegisterSettings", "load_settings"]
