"""Quote-aware tokenizing, syntax checks, environment and builtins for a small shell."""

__version__ = "0.1.0"

__all__ = [
    "quoting",
    "text",
    "splitting",
    "chunks",
    "environment",
    "validation",
    "builtins",
    "signals",
]