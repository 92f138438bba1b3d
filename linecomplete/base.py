"""Core completion types: spans, suggestions and the completer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import groupby
from typing import Any


@dataclass(frozen=True, order=True)
class Span:
    """A region of the line, with positions measured in UTF-8 bytes."""

    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Can't create a Span whose end < start, start={self.start}, end={self.end}"
            )


@dataclass
class Suggestion:
    """A completion candidate and the span of the buffer it replaces."""

    value: str = ""
    description: str | None = None
    style: Any = None
    extra: list[str] | None = None
    span: Span = field(default_factory=Span)
    append_whitespace: bool = False


class Completer(ABC):
    """Turns a line and a cursor position into a list of suggestions."""

    @abstractmethod
    def complete(self, line: str, pos: int) -> list[Suggestion]:
        """Return the suggestions for ``line`` with the cursor at byte ``pos``."""

    def complete_with_base_ranges(
        self, line: str, pos: int
    ) -> tuple[list[Suggestion], list[range]]:
        """Return the suggestions and the distinct consecutive spans they replace."""
        suggestions = self.complete(line, pos)
        spans = (range(s.span.start, s.span.end) for s in suggestions)
        ranges = [key for key, _ in groupby(spans)]
        return suggestions, ranges

    def partial_complete(
        self, line: str, pos: int, start: int, offset: int
    ) -> list[Suggestion]:
        """Return ``offset`` suggestions starting at index ``start``."""
        return self.complete(line, pos)[start : start + offset]

    def total_completions(self, line: str, pos: int) -> int:
        """Return the number of available suggestions."""
        return len(self.complete(line, pos))