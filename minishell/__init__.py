"""A small interactive shell loop with word expansion, builtins, a line reader and printf helpers."""

__version__ = "0.1.0"
__all__ = [
    "builtins",
    "cli",
    "environment",
    "expansion",
    "fdprintf",
    "lines",
    "printf",
    "text",
]