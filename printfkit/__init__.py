"""A compact printf formatter with string, memory, character and list helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "memory",
    "strings",
    "text",
    "lists",
    "output",
    "conversions",
    "printf",
]