import pytest

from register_engine.registers import (
    Register,
    RegisterBehavior,
    RegisterNotFound,
    RegisterStore,
    make_register,
)


def make_store() -> RegisterStore:
    return RegisterStore()


def test_put_replaces_previous_register() -> None:
    store = make_store()
    first = Register(key="a", value="one")
    second = Register(key="a", value="two")

    store.put("a", first)
    store.put("a", second)

    assert store.get("a") is second
    assert first.value == "one"
    assert len(store) == 1


def test_register_fields_are_frozen() -> None:
    register = Register(key="a", value=1)

    with pytest.raises(AttributeError):
        register.value = 2  # type: ignore[misc]


def test_get_returns_none_for_missing_key() -> None:
    store = make_store()

    assert store.get("z") is None
    assert "z" not in store


def test_get_or_fail_raises_register_not_found() -> None:
    store = make_store()

    with pytest.raises(RegisterNotFound) as info:
        store.get_or_fail("q")

    assert info.value.key == "q"


def test_make_register_stores_and_returns_register() -> None:
    store = make_store()

    register = make_register(store, "k", "hello")

    assert store.get("k") is register
    assert register.behavior.is_default


def test_make_register_keeps_behavior_overrides() -> None:
    store = make_store()

    register = make_register(store, "k", 3, print_func=lambda value: f"<{value}>")

    assert register.behavior.print_func is not None
    assert register.behavior.print_func(register.value) == "<3>"


def test_make_register_rejects_behavior_and_funcs_together() -> None:
    store = make_store()

    with pytest.raises(ValueError):
        make_register(
            store,
            "k",
            1,
            behavior=RegisterBehavior(),
            print_func=lambda value: "x",
        )
    assert "k" not in store


def test_behavior_requires_callables() -> None:
    with pytest.raises(TypeError):
        RegisterBehavior(jump_func="not callable")  # type: ignore[arg-type]


def test_for_each_visits_every_register_and_allows_writes() -> None:
    store = make_store()
    make_register(store, "a", 1)
    make_register(store, "b", 2)
    seen: dict[object, object] = {}

    def visit(key: object, register: Register) -> None:
        seen[key] = register.value
        store.put(key, register.with_value(register.value * 10))

    store.for_each(visit)

    assert seen == {"a": 1, "b": 2}
    assert store.get("a").value == 10
    assert store.get("b").value == 20


def test_iter_sorted_orders_keys_ascending() -> None:
    store = make_store()
    for key in ("c", "a", "b"):
        make_register(store, key, key.upper())

    assert [register.key for register in store.iter_sorted()] == ["a", "b", "c"]


def test_iter_sorted_handles_mixed_key_types() -> None:
    store = make_store()
    make_register(store, "a", 1)
    make_register(store, 2, 2)
    make_register(store, 1, 1)

    keys = [register.key for register in store.iter_sorted()]

    assert keys == [1, 2, "a"]


def test_remove_and_clear() -> None:
    store = make_store()
    make_register(store, "a", 1)
    make_register(store, "b", 2)
    before = store.revision()

    removed = store.remove("a")
    assert removed is not None and removed.value == 1
    assert store.remove("a") is None

    store.clear()

    assert len(store) == 0
    assert store.revision() == before + 2
