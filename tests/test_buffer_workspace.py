import pytest

from register_engine.buffer import Buffer, BufferValidationError, Workspace


def test_insert_moves_point_and_shifts_later_markers() -> None:
    buffer = Buffer(name="b", text="abcdef")
    before = buffer.make_marker(1)
    at = buffer.make_marker(3)
    after = buffer.make_marker(5)
    buffer.goto(3)

    buffer.insert("XY")

    assert buffer.text == "abcXYdef"
    assert buffer.point == 5
    assert (before.position, at.position, after.position) == (1, 3, 7)


def test_delete_region_collapses_markers_inside() -> None:
    buffer = Buffer(name="b", text="0123456789")
    inside = buffer.make_marker(4)
    after = buffer.make_marker(8)

    removed = buffer.delete_region(6, 2)

    assert removed == "2345"
    assert buffer.text == "016789"
    assert inside.position == 2
    assert after.position == 4


def test_region_out_of_range() -> None:
    buffer = Buffer(name="b", text="abc")

    with pytest.raises(BufferValidationError):
        buffer.region_text(0, 10)


def test_extract_rectangle_pads_short_lines() -> None:
    buffer = Buffer(name="b", text="abcdef\nab\nabcdef")
    start = 1  # row 0, col 1
    end = buffer.document.offset_for_cursor((2, 4))

    block = buffer.extract_rectangle(start, end)

    assert block == ["bcd", "b  ", "bcd"]
    assert buffer.text == "abcdef\nab\nabcdef"


def test_extract_rectangle_with_delete() -> None:
    buffer = Buffer(name="b", text="abcdef\nabcdef")
    end = buffer.document.offset_for_cursor((1, 3))

    block = buffer.extract_rectangle(1, end, delete=True)

    assert block == ["bc", "bc"]
    assert buffer.text == "adef\nadef"
    assert buffer.point == 1


def test_insert_rectangle_at_column() -> None:
    buffer = Buffer(name="b", text="1234\n12")
    buffer.goto(2)

    buffer.insert_rectangle(["ab", "cd", "ef"])

    assert buffer.text == "12ab34\n12cd\n  ef"


def test_insert_rectangle_shifts_markers_row_by_row() -> None:
    buffer = Buffer(name="b", text="abcd\nefgh")
    at_point = buffer.make_marker(5)
    same_row = buffer.make_marker(7)
    buffer.goto(5)

    buffer.insert_rectangle(["ab", "ef"])

    assert buffer.text == "abcd\nabefgh\nef"
    assert at_point.position == 5
    assert buffer.text[same_row.position :] == "gh\nef"


def test_insert_rectangle_carries_shift_to_later_rows() -> None:
    buffer = Buffer(name="b", text="1234\n5678\n9")
    later = buffer.make_marker(10)  # start of the last line
    buffer.goto(1)

    buffer.insert_rectangle(["xx", "yy"])

    assert buffer.text == "1xx234\n5yy678\n9"
    assert buffer.text[later.position :] == "9"


def test_delete_rectangle_shifts_markers_row_by_row() -> None:
    buffer = Buffer(name="b", text="abcd\nefgh")
    first_row = buffer.make_marker(3)
    second_row = buffer.make_marker(8)
    inside = buffer.make_marker(6)

    block = buffer.extract_rectangle(1, 7, delete=True)

    assert block == ["b", "f"]
    assert buffer.text == "acd\negh"
    assert buffer.text[first_row.position :] == "d\negh"
    assert buffer.text[second_row.position :] == "h"
    assert inside.position == 5


def test_delete_rectangle_skips_short_lines() -> None:
    buffer = Buffer(name="b", text="abcd\na\nabcd")
    last = buffer.make_marker(10)
    end = buffer.document.offset_for_cursor((2, 3))

    buffer.extract_rectangle(1, end, delete=True)

    assert buffer.text == "ad\na\nad"
    assert buffer.text[last.position :] == "d"


def test_scan_number_at_point() -> None:
    buffer = Buffer(name="b", text="x  -42 rest")
    buffer.goto(1)

    assert buffer.scan_number_at_point() == -42
    buffer.goto(0)
    assert buffer.scan_number_at_point() is None


def test_kill_detaches_markers() -> None:
    buffer = Buffer(name="b", text="abc")
    marker = buffer.make_marker(2)

    buffer.kill()

    assert marker.buffer is None
    assert buffer.live is False


def test_workspace_kill_runs_hooks_before_detaching() -> None:
    workspace = Workspace()
    buffer = workspace.create_buffer("doc", "text", file_path="/doc")
    marker = buffer.make_marker(1)
    seen: list[bool] = []
    workspace.on_kill(lambda killed: seen.append(workspace.marker_is_bound(marker)))
    workspace.switch_to_source(buffer)

    workspace.kill_buffer("doc")

    assert seen == [True]
    assert workspace.marker_is_bound(marker) is False
    assert workspace.current.name == "*scratch*"
    assert all(windows for windows in workspace.frames)


def test_open_file_reuses_existing_buffer() -> None:
    workspace = Workspace(files={"/x/notes.txt": "content"})

    first = workspace.open_file("/x/notes.txt")
    second = workspace.open_file("/x/notes.txt")

    assert first is second
    assert first.name == "notes.txt"
    assert workspace.current is first


def test_open_file_picks_unique_buffer_name() -> None:
    workspace = Workspace()
    workspace.create_buffer("a.txt")

    opened = workspace.open_file("/other/a.txt")

    assert opened.name == "a.txt<2>"
