from __future__ import annotations

import pytest

from register_engine.actions import (
    RegisterContext,
    append_to_register,
    copy_rectangle_to_register,
    copy_to_register,
    frame_configuration_to_register,
    increment_register,
    insert_register,
    jump_to_register,
    list_registers,
    notify_source_destroyed,
    number_to_register,
    point_to_register,
    prepend_to_register,
    track_source_destruction,
    view_register,
    window_configuration_to_register,
)
from register_engine.buffer import Workspace
from register_engine.registers import (
    AccessAborted,
    DeferredFileRef,
    FrameLayout,
    MarkerRef,
    NotANumber,
    Rectangle,
    RegisterNotFound,
    RegisterStore,
    WindowLayout,
)
from register_engine.runtime.config import RegisterSettings


def make_context(
    text: str = "",
    *,
    settings: RegisterSettings | None = None,
    workspace: Workspace | None = None,
) -> RegisterContext:
    host = workspace or Workspace()
    if text:
        host.insert_text(text)
        host.goto_position(0)
    return RegisterContext(
        store=RegisterStore(), host=host, settings=settings or RegisterSettings()
    )


def test_copy_and_insert_leaves_point_before_text() -> None:
    context = make_context("hello world")

    copy_to_register(context, "a", 0, 5)
    context.host.goto_position(11)
    result = insert_register(context, "a")

    assert result.payload == "hello"
    assert context.host.current.text == "hello worldhello"
    assert context.host.current_position() == 11


def test_insert_with_point_after() -> None:
    context = make_context("abc")
    copy_to_register(context, "a", 0, 3)

    insert_register(context, "a", point_after=True)

    assert context.host.current.text == "abcabc"
    assert context.host.current_position() == 3


def test_copy_with_delete_removes_region() -> None:
    context = make_context("keep-drop")

    copy_to_register(context, "d", 4, 9, delete=True)

    assert context.store.get("d").value == "-drop"
    assert context.host.current.text == "keep"


def test_copy_rectangle_is_tagged() -> None:
    context = make_context("abc\ndef")

    result = copy_rectangle_to_register(context, "r", 0, 6)

    assert result.payload == ("ab", "de")
    assert context.store.get("r").value == Rectangle(lines=("ab", "de"))


def test_jump_after_rectangle_insert_follows_marker() -> None:
    context = make_context("abcd\nefgh")
    context.host.goto_position(7)
    point_to_register(context, "p")
    copy_rectangle_to_register(context, "r", 0, 7)
    context.host.goto_position(5)

    insert_register(context, "r")
    jump_to_register(context, "p")

    position = context.host.current_position()
    assert context.host.current.text == "abcd\nabefgh\nef"
    assert context.host.current.text[position : position + 2] == "gh"


def test_append_and_prepend_regions() -> None:
    context = make_context("one two three")

    append_to_register(context, "x", 0, 3)
    append_to_register(context, "x", 3, 7)
    prepend_to_register(context, "x", 7, 13)

    assert context.store.get("x").value == " threeone two"


def test_append_uses_separator_register() -> None:
    context = make_context(
        "alpha beta", settings=RegisterSettings(separator_register="+")
    )
    copy_to_register(context, "+", 5, 6)
    copy_to_register(context, "s", 0, 5)
    context.store.put("+", context.store.get("+").with_value("\n"))

    append_to_register(context, "s", 6, 10)

    assert context.store.get("s").value == "alpha\nbeta"


def test_append_with_delete() -> None:
    context = make_context("abcdef")

    append_to_register(context, "x", 0, 3, delete=True)

    assert context.store.get("x").value == "abc"
    assert context.host.current.text == "def"


def test_point_to_register_and_jump() -> None:
    context = make_context("0123456789")
    context.host.goto_position(6)

    point_to_register(context, "p")
    context.host.goto_position(0)
    jump_to_register(context, "p")

    assert isinstance(context.store.get("p").value, MarkerRef)
    assert context.host.current_position() == 6


def test_point_to_register_with_frame_flag() -> None:
    context = make_context()

    point_to_register(context, "p", frame=True)

    assert isinstance(context.store.get("p").value, FrameLayout)


def test_window_and_frame_configuration_commands() -> None:
    context = make_context()

    window_configuration_to_register(context, "w")
    frame_configuration_to_register(context, "f")

    assert isinstance(context.store.get("w").value, WindowLayout)
    assert isinstance(context.store.get("f").value, FrameLayout)
    context.host.make_frame()
    jump_to_register(context, "f", delete=True)
    assert len(context.host.frames) == 1


def test_jump_to_missing_register() -> None:
    with pytest.raises(RegisterNotFound):
        jump_to_register(make_context(), "nope")


def test_number_commands() -> None:
    context = make_context("  17 apples")

    number_to_register(context, "n")
    increment_register(context, "n", 3)
    number_to_register(context, "m", 5)

    assert context.store.get("n").value == 20
    assert context.store.get("m").value == 5


def test_increment_text_register_fails() -> None:
    context = make_context("abc")
    copy_to_register(context, "t", 0, 3)

    with pytest.raises(NotANumber):
        increment_register(context, "t")


def test_view_register_is_verbose() -> None:
    context = make_context("line one\nline two")
    copy_to_register(context, "v", 0, 17)

    result = view_register(context, "v")

    assert result.message == "Register v contains text:\nline one\nline two"


def test_list_registers_sorted_and_terse() -> None:
    context = make_context("   The quick brown fox jumps")
    copy_to_register(context, "b", 0, 28)
    number_to_register(context, "a", 3)

    result = list_registers(context)

    assert result.payload == 2
    lines = result.message.split("\n")
    assert lines[0] == "Register a contains 3"
    assert lines[1] == "Register b contains text starting with"
    assert lines[2] == "    The quick brown fox "


def test_notify_source_destroyed_then_jump_prompts() -> None:
    answers = iter([False, True])
    workspace = Workspace(
        files={"/tmp/src.py": "x" * 60}, confirm=lambda path: next(answers)
    )
    source = workspace.open_file("/tmp/src.py")
    source.goto(42)
    context = make_context(workspace=workspace)
    point_to_register(context, "s")

    track_source_destruction(context, workspace)
    workspace.kill_buffer(source.name)

    assert context.store.get("s").value == DeferredFileRef("/tmp/src.py", 42)
    with pytest.raises(AccessAborted):
        jump_to_register(context, "s")
    jump_to_register(context, "s")
    assert workspace.current.file_path == "/tmp/src.py"
    assert workspace.current_position() == 42


def test_notify_source_destroyed_reports_count() -> None:
    context = make_context()
    buffer = context.host.create_buffer("b", "abc", file_path="/b")
    point_to_register(context, "x")
    context.host.switch_to_source(buffer)
    point_to_register(context, "y")

    result = notify_source_destroyed(context, buffer, "/b")

    assert result.payload == 1
    assert isinstance(context.store.get("x").value, MarkerRef)


def test_context_create_loads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGISTER_ENGINE_TERSE_WIDTH", "5")

    context = RegisterContext.create(Workspace())

    assert context.settings.terse_width == 5
    assert context.dispatcher.settings is context.settings
    assert len(context.store) == 0
