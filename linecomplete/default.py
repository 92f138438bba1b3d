"""A keyword completer backed by a character trie."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from .base import Completer, Span, Suggestion


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class _Node:
    __slots__ = ("children", "leaf")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.leaf = False

    def walk(self):
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())

    def collect(self) -> list[str]:
        results: list[str] = []
        stack: list[tuple[_Node, str]] = [(self, "")]
        while stack:
            node, partial = stack.pop()
            if node.leaf:
                results.append(partial)
            for char, child in sorted(node.children.items(), reverse=True):
                stack.append((child, partial + char))
        return results


class DefaultCompleter(Completer):
    """Completes words and phrases from a set of known commands."""

    def __init__(
        self,
        commands: Iterable[str] | None = None,
        min_word_len: int = 2,
        inclusions: Iterable[str] = (),
    ) -> None:
        self._root = _Node()
        self._inclusions = frozenset(inclusions)
        self.min_word_len = min_word_len
        if commands is not None:
            self.insert(commands)

    @classmethod
    def with_word_len(cls, commands: Iterable[str], min_word_len: int) -> DefaultCompleter:
        """Create a completer that ignores words shorter than ``min_word_len`` bytes."""
        return cls(commands, min_word_len=min_word_len)

    @classmethod
    def with_inclusions(cls, inclusions: Iterable[str]) -> DefaultCompleter:
        """Create an empty completer that also accepts the given special characters."""
        return cls(inclusions=inclusions)

    def set_min_word_len(self, length: int) -> DefaultCompleter:
        """Set the minimum word length for future inserts and return the completer."""
        self.min_word_len = length
        return self

    def _accepts(self, char: str) -> bool:
        return char in self._inclusions or char.isalnum() or char.isspace()

    def insert(self, words: Iterable[str]) -> None:
        """Add words; each is stored up to its first unsupported character."""
        for word in words:
            if _byte_len(word) < self.min_word_len:
                continue
            node = self._root
            for char in word:
                if not self._accepts(char):
                    break
                node = node.children.setdefault(char, _Node())
            node.leaf = True

    def clear(self) -> None:
        """Remove every stored word."""
        self._root.children.clear()

    def word_count(self) -> int:
        """Return the number of stored words."""
        return sum(1 for node in self._root.walk() if node.leaf)

    def size(self) -> int:
        """Return the number of nodes in the trie, the root included."""
        return sum(1 for _ in self._root.walk())

    def _extensions(self, prefix: str) -> list[str] | None:
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node.collect()

    def complete(self, line: str, pos: int) -> list[Suggestion]:
        """Complete the words that end at byte ``pos``, longest phrases last."""
        raw = line.encode("utf-8")
        if len(raw) > pos:
            line = raw[:pos].decode("utf-8")
        completions: list[Suggestion] = []
        if line:
            line = line.replace("\r\n", "  ").replace("\n", " ")
            whitespaces = 0
            span_line = ""
            for part in reversed(line.split(" ")):
                if not part:
                    whitespaces += 1
                    continue
                span_line = part if not span_line else f"{part} {span_line}"
                extensions = self._extensions(span_line)
                if extensions is None:
                    continue
                start = pos - _byte_len(span_line) - whitespaces
                for ext in sorted(extensions):
                    suggestion = Suggestion(
                        value=f"{span_line}{ext}", span=Span(start, pos)
                    )
                    if _byte_len(suggestion.value) > pos - start:
                        completions.append(suggestion)
        return [key for key, _ in groupby(completions)]