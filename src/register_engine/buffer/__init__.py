"""In-memory buffers and the reference ``RegisterHost`` built on them."""

from .buffer import Buffer, Marker
from .document import BufferDocument, BufferValidationError, Cursor
from .workspace import FrameSnapshot, WindowSnapshot, Workspace

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferValidationError",
    "Cursor",
    "Marker",
    "Workspace",
    "WindowSnapshot",
    "FrameSnapshot",
]
