"""Interactive line input with keyword completion."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .default import DefaultCompleter

DEFAULT_COMMANDS = [
    "test",
    "clear",
    "exit",
    "history 1",
    "history 2",
    "logout",
    "login",
    "hello world",
    "hello world reedline",
    "hello world something",
    "hello world another",
    "hello world 1",
    "hello world 2",
    "hello another very large option for hello word that will force one column",
    "this is the reedline crate",
    "abaaabas",
    "abaaacas",
    "ababac",
    "abacaxyc",
    "abadarabc",
]


def build_completer(commands: Iterable[str] | None = None, min_word_len: int = 2) -> DefaultCompleter:
    """Build a completer over ``commands``, or the built-in command list."""
    if commands is None:
        commands = DEFAULT_COMMANDS
    return DefaultCompleter.with_word_len(commands, min_word_len)


def _apply(line: str, value: str, start: int, end: int) -> str:
    raw = line.encode("utf-8")
    return (raw[:start] + value.encode("utf-8") + raw[end:]).decode("utf-8")


def _install_readline(completer: DefaultCompleter) -> None:
    try:
        import readline
    except ImportError:
        return

    cache: list[str] = []

    def complete(text: str, state: int) -> str | None:
        if state == 0:
            buffer = readline.get_line_buffer()[: readline.get_endidx()]
            pos = len(buffer.encode("utf-8"))
            cache[:] = [
                _apply(buffer, s.value, s.span.start, s.span.end)
                for s in completer.complete(buffer, pos)
            ]
        return cache[state] if state < len(cache) else None

    readline.set_completer_delims("")
    readline.set_completer(complete)
    readline.parse_and_bind("tab: complete")


def main(argv: list[str] | None = None) -> int:
    """Read lines with completion, or print the completions of one text."""
    parser = argparse.ArgumentParser(prog="linecomplete", description=__doc__)
    parser.add_argument("commands", nargs="*", help="keywords to complete (default: built-in list)")
    parser.add_argument("--min-word-len", type=int, default=2)
    parser.add_argument("--complete", metavar="TEXT", help="print completions of TEXT and exit")
    args = parser.parse_args(argv)

    completer = build_completer(args.commands or None, args.min_word_len)

    if args.complete is not None:
        text = args.complete
        for suggestion in completer.complete(text, len(text.encode("utf-8"))):
            print(suggestion.value)
        return 0

    if sys.stdin.isatty():
        _install_readline(completer)

    while True:
        try:
            buffer = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nAborted!")
            return 0
        print(f"We processed: {buffer}")


if __name__ == "__main__":
    sys.exit(main())