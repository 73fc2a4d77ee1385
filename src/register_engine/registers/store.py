"""Keyed storage for registers."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterator, Optional

from register_engine.runtime.telemetry import span

from .errors import RegisterNotFound
from .models import Register

RegisterVisitor = Callable[[Hashable, Register], None]


class RegisterStore:
    """Maps keys to the latest ``Register`` written under them.

    Writes always replace the previous record; holders of an old record keep
    seeing its old value, the store only ever yields the newest one.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._registers: Dict[Hashable, Register] = {}
        self._logger_name = logger_name
        self._revision = 0

    @property
    def logger_name(self) -> str | None:
        return self._logger_name

    def revision(self) -> int:
        return self._revision

    def put(self, key: Hashable, register: Register) -> None:
        with span(
            "registers::put",
            logger_name=self._logger_name,
            component="registers",
            metadata={"key": key, "kind": type(register.value).__name__},
        ):
            self._registers[key] = register
            self._revision += 1

    def get(self, key: Hashable) -> Optional[Register]:
        return self._registers.get(key)

    def get_or_fail(self, key: Hashable) -> Register:
        register = self._registers.get(key)
        if register is None:
            raise RegisterNotFound(key)
        return register

    def for_each(self, visitor: RegisterVisitor) -> None:
        # Snapshot so visitors may write back into the store.
        for key, register in list(self._registers.items()):
            visitor(key, register)

    def iter_sorted(self) -> Iterator[Register]:
        for key in sorted(self._registers, key=_sort_key):
            yield self._registers[key]

    def keys(self) -> tuple[Hashable, ...]:
        return tuple(self._registers)

    def remove(self, key: Hashable) -> Optional[Register]:
        register = self._registers.pop(key, None)
        if register is not None:
            self._revision += 1
        return register

    def clear(self) -> None:
        if self._registers:
            self._registers.clear()
            self._revision += 1

    def __contains__(self, key: object) -> bool:
        return key in self._registers

    def __len__(self) -> int:
        return len(self._registers)


def _sort_key(key: Hashable) -> tuple[str, object]:
    # Mixed key types cannot be compared directly; group them by type first.
    if isinstance(key, str):
        return ("str", key)
    if isinstance(key, (int, float)) and not isinstance(key, bool):
        return ("num", key)
    return (type(key).__name__, repr(key))


__all__ = ["RegisterStore", "RegisterVisitor"]
