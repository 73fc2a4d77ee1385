"""Operations that build registers or replace them with transformed values."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional

from register_engine.runtime import telemetry
from register_engine.runtime.telemetry import span

from .classify import is_number
from .errors import NotANumber, NotTextOrEmpty
from .host import RegisterHost
from .models import (
    DEFAULT_BEHAVIOR,
    DeferredFileRef,
    InsertFunc,
    JumpFunc,
    MarkerRef,
    PrintFunc,
    Register,
    RegisterBehavior,
)
from .store import RegisterStore

NumberScanner = Callable[[], Optional[int]]


def make_register(
    store: RegisterStore,
    key: Hashable,
    value: Any,
    *,
    print_func: Optional[PrintFunc] = None,
    jump_func: Optional[JumpFunc] = None,
    insert_func: Optional[InsertFunc] = None,
    behavior: Optional[RegisterBehavior] = None,
) -> Register:
    """Build a register and store it under ``key`` in one step."""

    if behavior is not None and (print_func or jump_func or insert_func):
        raise ValueError("Provide either `behavior` or individual funcs, not both.")
    if behavior is None:
        behavior = RegisterBehavior(
            print_func=print_func, jump_func=jump_func, insert_func=insert_func
        )
        if behavior.is_default:
            behavior = DEFAULT_BEHAVIOR

    register = Register(key=key, value=value, behavior=behavior)
    store.put(key, register)
    return register


def _replace_value(store: RegisterStore, current: Register, value: Any) -> Register:
    updated = current.with_value(value)
    store.put(current.key, updated)
    return updated


def store_number(
    store: RegisterStore,
    key: Hashable,
    number: Optional[int | float] = None,
    scan: Optional[NumberScanner] = None,
) -> Register:
    """Store ``number``; without one, use what ``scan`` finds at point, else 0."""

    if number is None:
        scanned = scan() if scan is not None else None
        number = scanned if scanned is not None else 0
    return make_register(store, key, number)


def increment(store: RegisterStore, key: Hashable, delta: int | float = 1) -> Register:
    with span(
        "registers::increment",
        logger_name=store.logger_name,
        component="registers",
        metadata={"key": key, "delta": delta},
    ):
        current = store.get_or_fail(key)
        if not is_number(current.value):
            raise NotANumber(key, current.value)
        return _replace_value(store, current, current.value + delta)


def append_text(
    store: RegisterStore,
    key: Hashable,
    text: str,
    *,
    separator: Optional[str] = None,
) -> Register:
    return _join_text(store, key, text, separator=separator, at_end=True)


def prepend_text(
    store: RegisterStore,
    key: Hashable,
    text: str,
    *,
    separator: Optional[str] = None,
) -> Register:
    return _join_text(store, key, text, separator=separator, at_end=False)


def _join_text(
    store: RegisterStore,
    key: Hashable,
    text: str,
    *,
    separator: Optional[str],
    at_end: bool,
) -> Register:
    with span(
        "registers::append" if at_end else "registers::prepend",
        logger_name=store.logger_name,
        component="registers",
        metadata={"key": key},
    ):
        current = store.get(key)
        if current is None:
            return make_register(store, key, text)
        if not isinstance(current.value, str):
            raise NotTextOrEmpty(key, current.value)

        pieces = [current.value, text] if at_end else [text, current.value]
        return _replace_value(store, current, (separator or "").join(pieces))


def swap_out_on_source_destroyed(
    store: RegisterStore,
    host: RegisterHost,
    source: Any,
    path: Optional[str],
) -> int:
    """Turn markers into ``source`` into deferred references to ``path``.

    Call this right before the host destroys ``source`` so that jumping to
    the affected registers can offer to revisit the file later. Returns how
    many registers were swapped; sources without a file are left alone.
    """

    if path is None:
        return 0

    swapped: list[Hashable] = []

    def visit(key: Hashable, register: Register) -> None:
        value = register.value
        if not isinstance(value, MarkerRef):
            return
        marker = value.marker
        if not host.marker_is_bound(marker) or host.marker_source(marker) != source:
            return
        offset = host.marker_position(marker)
        store.put(key, register.with_value(DeferredFileRef(path=path, offset=offset)))
        swapped.append(key)

    store.for_each(visit)
    if swapped:
        telemetry.record_event(
            "registers.swap_out",
            data={"path": path, "keys": ",".join(str(key) for key in swapped)},
            logger_name=store.logger_name,
        )
    return len(swapped)


__all__ = [
    "NumberScanner",
    "make_register",
    "store_number",
    "increment",
    "append_text",
    "prepend_text",
    "swap_out_on_source_destroyed",
]
