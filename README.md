# linecomplete

Tab completion for command-line text input. You give it the words, commands or
earlier command lines it should know. It then suggests completions for the text
in front of the cursor.

## Completers

All completers derive from `linecomplete.base.Completer`. Subclasses implement
`complete(line, pos)`, where `pos` is the cursor position in UTF-8 bytes. The
method returns a list of `Suggestion` objects.

A `Suggestion` has these fields:

- `value`: the replacement text.
- `span`: a `Span(start, end)` of byte positions in the line that the value
  replaces. Creating a `Span` with `end < start` raises `ValueError`.
- `description`, `style`, `extra` and `append_whitespace`: optional fields for
  a caller's own use.

The base class also provides these methods:

- `complete_with_base_ranges(line, pos)` returns the suggestions together with
  the spans they replace, as `range` objects. Consecutive duplicate spans are
  merged into one.
- `partial_complete(line, pos, start, offset)` returns `offset` suggestions,
  starting at index `start`.
- `total_completions(line, pos)` returns the number of suggestions.

### DefaultCompleter

`linecomplete.default.DefaultCompleter` keeps a prefix tree of known words and
phrases. It completes the last word before the cursor. It also tries the
longer multi-word phrases that end at the cursor, and those suggestions come
after the shorter ones. Line breaks in the buffer count as spaces.

```python
from linecomplete.default import DefaultCompleter

completer = DefaultCompleter(["batman", "robin", "batmobile", "batcave", "robber"])
for suggestion in completer.complete("bat", 3):
    print(suggestion.value, suggestion.span)
# batcave Span(start=0, end=3)
# batman Span(start=0, end=3)
# batmobile Span(start=0, end=3)
```

- `insert(words)` adds more words.
- `clear()` removes all words.
- `word_count()` returns the number of stored words.
- `size()` returns the number of tree nodes, counting the root.

#### Minimum word length

Words shorter than `min_word_len` bytes (default 2) are skipped when they are
inserted. There are two ways to set it:

- `DefaultCompleter.with_word_len(commands, n)` sets it when you create the
  completer.
- `set_min_word_len(n)` changes it for words inserted later and returns the
  completer.

#### Punctuation in words

Only letters, digits and whitespace go into the tree by default. A word is
stored only up to its first other character. To accept more characters, start
from `DefaultCompleter.with_inclusions(['-', '_'])`.

### HistoryCompleter

`linecomplete.history.HistoryCompleter(history)` suggests earlier command lines
that contain the typed text.

- `history` is any iterable of entries, oldest first. Each entry is either a
  string or an object with a `command_line` attribute.
- Suggestions come newest first, and each command line appears only once.
- Each suggestion replaces the whole typed line.
- Any text from the first `!` onwards is left out of the search.

```python
from linecomplete.history import HistoryCompleter

completer = HistoryCompleter(["git status", "ls", "git stash drop", "git status"])
print([s.value for s in completer.complete("git s", 5)])
# ['git status', 'git stash drop']
```

## Command line

```
linecomplete [COMMANDS ...] [--min-word-len N] [--complete TEXT]
```

If you give no `COMMANDS`, a built-in list is used.

- `--complete TEXT` prints the completions of `TEXT`, one per line, and exits.
- Without `--complete`, the command reads lines at a `> ` prompt and echoes
  each one as `We processed: ...`. When input is a terminal and Python's
  `readline` module is available, Tab completes the line from the command
  list.
- End the session with Ctrl-D or Ctrl-C.

`linecomplete.cli.build_completer(commands, min_word_len)` builds the same
`DefaultCompleter` the command uses.

## What it does not do

This package only produces completion suggestions. It has no line editor, key
bindings, completion menus or prompt rendering of its own; the interactive
command relies on Python's `readline` for that. It does not store history
either: `HistoryCompleter` only reads the entries you pass to it.

## Installing

```
pip install .
```

Add the `test` extra to install pytest for running the test suite.