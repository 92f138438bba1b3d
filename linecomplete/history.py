"""A completer that suggests earlier command lines from a history."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .base import Completer, Span, Suggestion

SELECTION_CHAR = "!"


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _command_line(entry: Any) -> str:
    return getattr(entry, "command_line", entry)


def _search_text(line: str) -> str:
    """Return the part of ``line`` that is searched for, before any selection marker."""
    return line.split(SELECTION_CHAR, 1)[0]


class HistoryCompleter(Completer):
    """Suggests distinct history entries that contain the typed text, newest first.

    ``history`` is an iterable of entries, oldest first. Each entry is either
    a string or an object with a ``command_line`` attribute.
    """

    def __init__(self, history: Iterable[Any]) -> None:
        self._history = history

    def _search_unique(self, line: str) -> list[str]:
        needle = _search_text(line)
        seen: set[str] = set()
        matches: list[str] = []
        for entry in reversed(list(self._history)):
            command = _command_line(entry)
            if needle in command and command not in seen:
                seen.add(command)
                matches.append(command)
        return matches

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        """Return one suggestion per distinct matching entry, replacing the whole line."""
        try:
            matches = self._search_unique(line)
        except (OSError, ValueError):
            return []
        span = Span(pos - _byte_len(line), pos)
        return [Suggestion(value=command, span=span) for command in matches]

    def total_completions(self, line: str, pos: int) -> int:
        """Return the number of distinct matching entries."""
        try:
            return len(self._search_unique(line))
        except (OSError, ValueError):
            return 0