"""Failures reported by register lookups, dispatch and mutation."""

from __future__ import annotations

from typing import Any, Hashable


class RegisterError(RuntimeError):
    """Base class for every register failure surfaced to the command layer."""

    def __init__(self, message: str, *, key: Hashable | None = None) -> None:
        super().__init__(message)
        self.key = key


class RegisterNotFound(RegisterError):
    def __init__(self, key: Hashable) -> None:
        super().__init__(f"Register '{key}' is empty", key=key)


class NotANumber(RegisterError):
    def __init__(self, key: Hashable, value: Any) -> None:
        super().__init__(f"Register '{key}' does not contain a number", key=key)
        self.value = value


class NotTextOrEmpty(RegisterError):
    def __init__(self, key: Hashable, value: Any) -> None:
        super().__init__(
            f"Register '{key}' does not contain text and is not empty", key=key
        )
        self.value = value


class DeadReference(RegisterError):
    """The marker's buffer is gone and nothing replaced it."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(
            f"Register '{key}' points to a buffer that no longer exists", key=key
        )


class NoRestoreTarget(RegisterError):
    def __init__(self, key: Hashable, value: Any) -> None:
        super().__init__(
            f"Register '{key}' doesn't contain a position or configuration",
            key=key,
        )
        self.value = value


class NoInsertableContent(RegisterError):
    def __init__(self, key: Hashable, value: Any) -> None:
        super().__init__(f"Register '{key}' does not contain text", key=key)
        self.value = value


class AccessAborted(RegisterError):
    """The user declined to revisit the file behind a deferred reference."""

    def __init__(self, key: Hashable, path: str) -> None:
        super().__init__(f"Register access aborted for '{path}'", key=key)
        self.path = path


__all__ = [
    "RegisterError",
    "RegisterNotFound",
    "NotANumber",
    "NotTextOrEmpty",
    "DeadReference",
    "NoRestoreTarget",
    "NoInsertableContent",
    "AccessAborted",
]
