"""Keyed registers for positions, text, numbers, rectangles and layouts."""

__all__ = [
    "actions",
    "buffer",
    "keymaps",
    "registers",
    "runtime",
]

__version__ = "0.1.0"
