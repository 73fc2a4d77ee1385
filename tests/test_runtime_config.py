import pytest

from register_engine.runtime.config import (
    DEFAULT_TERSE_WIDTH,
    RegisterSettings,
    load_settings,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TERSE_WIDTH", "SEPARATOR_REGISTER", "LIST_VERBOSE"):
        monkeypatch.delenv(f"REGISTER_ENGINE_{name}", raising=False)

    settings = load_settings()

    assert settings == RegisterSettings()
    assert settings.terse_width == DEFAULT_TERSE_WIDTH == 20


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGISTER_ENGINE_TERSE_WIDTH", "8")
    monkeypatch.setenv("REGISTER_ENGINE_SEPARATOR_REGISTER", "+")
    monkeypatch.setenv("REGISTER_ENGINE_LIST_VERBOSE", "yes")

    settings = load_settings()

    assert settings.terse_width == 8
    assert settings.separator_register == "+"
    assert settings.list_verbose is True


def test_invalid_width(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGISTER_ENGINE_TERSE_WIDTH", "wide")

    with pytest.raises(ValueError):
        load_settings()


def test_width_must_be_positive() -> None:
    with pytest.raises(ValueError):
        RegisterSettings(terse_width=0)
