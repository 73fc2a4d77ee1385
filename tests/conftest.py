from __future__ import annotations

from contextlib import nullcontext
from typing import Any

import pytest

from register_engine.runtime import telemetry


class RecordingLogger:
    """Stands in for ``telelog.Logger`` and remembers what it was handed."""

    def __init__(self) -> None:
        self.context: dict[str, str] = {}
        self.requested: list[str | None] = []
        self.messages: list[tuple[str, str, dict[str, str]]] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def profile(self, name: str) -> Any:
        return nullcontext()

    def track_component(self, name: str) -> Any:
        return nullcontext()

    def info_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.messages.append(("info", message, dict(pairs)))

    def warning_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.messages.append(("warning", message, dict(pairs)))

    def error_with(self, message: str, pairs: list[tuple[str, str]]) -> None:
        self.messages.append(("error", message, dict(pairs)))


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()

    def fake_get_logger(name: str | None = None) -> RecordingLogger:
        logger.requested.append(name)
        return logger

    monkeypatch.setattr(telemetry, "get_logger", fake_get_logger)
    monkeypatch.setattr(telemetry, "_ACTIVE_CONTEXT", {})
    return logger
