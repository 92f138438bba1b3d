"""Word and history based tab completion for command-line text input."""

__version__ = "0.1.0"
__all__ = ["base", "default", "history", "cli"]