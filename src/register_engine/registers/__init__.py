"""Register values, their store, and the logic that prints/restores/inserts them."""

from .classify import ValueKind, classify, classify_and_describe, describe
from .dispatch import RegisterDispatcher
from .errors import (
    AccessAborted,
    DeadReference,
    NoInsertableContent,
    NoRestoreTarget,
    NotANumber,
    NotTextOrEmpty,
    RegisterError,
    RegisterNotFound,
)
from .host import RegisterHost
from .models import (
    DeferredFileRef,
    FileRef,
    FrameLayout,
    MarkerRef,
    Rectangle,
    Register,
    RegisterBehavior,
    WindowLayout,
)
from .operations import (
    append_text,
    increment,
    make_register,
    prepend_text,
    store_number,
    swap_out_on_source_destroyed,
)
from .store import RegisterStore

__all__ = [
    "Register",
    "RegisterBehavior",
    "RegisterStore",
    "RegisterHost",
    "RegisterDispatcher",
    "FrameLayout",
    "WindowLayout",
    "MarkerRef",
    "FileRef",
    "DeferredFileRef",
    "Rectangle",
    "ValueKind",
    "classify",
    "classify_and_describe",
    "describe",
    "make_register",
    "store_number",
    "increment",
    "append_text",
    "prepend_text",
    "swap_out_on_source_destroyed",
    "RegisterError",
    "RegisterNotFound",
    "NotANumber",
    "NotTextOrEmpty",
    "DeadReference",
    "NoRestoreTarget",
    "NoInsertableContent",
    "AccessAborted",
]
