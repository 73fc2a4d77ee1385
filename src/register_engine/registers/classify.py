"""Value-kind detection and human-readable descriptions."""

from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Any, Optional

from register_engine.runtime.config import DEFAULT_TERSE_WIDTH

from .host import RegisterHost
from .models import (
    DeferredFileRef,
    FileRef,
    FrameLayout,
    MarkerRef,
    Rectangle,
    WindowLayout,
)


class ValueKind(str, Enum):
    """Semantic kinds a register value can have, in detection order."""

    FRAME_LAYOUT = "frame_layout"
    WINDOW_LAYOUT = "window_layout"
    MARKER = "marker"
    FILE = "file"
    DEFERRED_FILE = "deferred_file"
    RECTANGLE = "rectangle"
    NUMBER = "number"
    TEXT = "text"
    GARBAGE = "garbage"


_TAGGED_KINDS: tuple[tuple[type, ValueKind], ...] = (
    (FrameLayout, ValueKind.FRAME_LAYOUT),
    (WindowLayout, ValueKind.WINDOW_LAYOUT),
    (MarkerRef, ValueKind.MARKER),
    (FileRef, ValueKind.FILE),
    (DeferredFileRef, ValueKind.DEFERRED_FILE),
    (Rectangle, ValueKind.RECTANGLE),
)


def classify(value: Any) -> ValueKind:
    for value_type, kind in _TAGGED_KINDS:
        if isinstance(value, value_type):
            return kind
    if is_number(value):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.GARBAGE


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def classify_and_describe(
    value: Any,
    *,
    verbose: bool,
    host: Optional[RegisterHost] = None,
    width: int = DEFAULT_TERSE_WIDTH,
) -> tuple[ValueKind, str]:
    """Return the kind of ``value`` and the text ``view``/``list`` show for it.

    Terse mode keeps each description short enough for a one-line listing;
    verbose mode dumps rectangles, text and garbage in full.
    """

    kind = classify(value)
    if kind is ValueKind.NUMBER:
        text = str(value)
    elif kind is ValueKind.MARKER:
        text = _describe_marker(value.marker, host)
    elif kind is ValueKind.WINDOW_LAYOUT:
        text = "a window configuration."
    elif kind is ValueKind.FRAME_LAYOUT:
        text = "a frame configuration."
    elif kind is ValueKind.FILE:
        text = f'the file "{value.path}"'
    elif kind is ValueKind.DEFERRED_FILE:
        text = (
            "a file-query reference\n"
            f"    file {value.path},\n"
            f"    position {value.offset}"
        )
    elif kind is ValueKind.RECTANGLE:
        text = _describe_rectangle(value.lines, verbose)
    elif kind is ValueKind.TEXT:
        text = _describe_text(value, verbose, width)
    elif verbose:
        text = f"Garbage:\n{value!r}"
    else:
        text = "Garbage"
    return kind, text


def describe(
    value: Any,
    *,
    verbose: bool,
    host: Optional[RegisterHost] = None,
    width: int = DEFAULT_TERSE_WIDTH,
) -> str:
    return classify_and_describe(value, verbose=verbose, host=host, width=width)[1]


def _describe_marker(marker: Any, host: Optional[RegisterHost]) -> str:
    if host is not None:
        if not host.marker_is_bound(marker):
            return "a marker in no buffer"
        source = host.marker_source(marker)
        position = host.marker_position(marker)
        return f"position {position} in buffer {host.source_name(source)}"

    source = getattr(marker, "buffer", None)
    if source is None:
        return "a marker in no buffer"
    name = getattr(source, "name", source)
    return f"position {getattr(marker, 'position', '?')} in buffer {name}"


def _describe_rectangle(lines: tuple[str, ...], verbose: bool) -> str:
    if verbose:
        body = "".join(f"\n    {line}" for line in lines)
        return f"the rectangle:{body}"
    first = lines[0] if lines else ""
    return f"the rectangle starting with:\n    {first}"


def _describe_text(text: str, verbose: bool, width: int) -> str:
    if verbose:
        return f"text:\n{text}"

    start = next((i for i, char in enumerate(text) if not char.isspace()), None)
    if start is not None:
        return f"text starting with\n    {text[start:start + width]}"
    if text:
        return "whitespace"
    return "the empty string"


__all__ = [
    "ValueKind",
    "classify",
    "classify_and_describe",
    "describe",
    "is_number",
]
