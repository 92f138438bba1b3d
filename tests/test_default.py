from linecomplete.base import Span, Suggestion
from linecomplete.default import DefaultCompleter


def _s(value, start, end):
    return Suggestion(value=value, span=Span(start, end))


HEROES = ["batman", "robin", "batmobile", "batcave", "robber"]


def test_complete_basic():
    c = DefaultCompleter()
    c.insert(HEROES)
    assert c.complete("bat", 3) == [
        _s("batcave", 0, 3),
        _s("batman", 0, 3),
        _s("batmobile", 0, 3),
    ]


def test_complete_multiline():
    c = DefaultCompleter()
    c.insert(HEROES)
    assert c.complete("to the\r\nbat", 11) == [
        _s("batcave", 8, 11),
        _s("batman", 8, 11),
        _s("batmobile", 8, 11),
    ]


def test_insert_in_pieces_same_as_whole():
    whole = DefaultCompleter()
    whole.insert(["a", "line", "with", "many", "words"])
    parts = DefaultCompleter()
    parts.insert(["a", "line", "with"])
    parts.insert(["many", "words"])
    assert whole.word_count() == parts.word_count()
    assert whole.size() == parts.size()


def test_inclusions():
    c = DefaultCompleter()
    c.insert(["test-hyphen", "test_underscore"])
    assert c.complete("te", 2) == [_s("test", 0, 2)]

    c = DefaultCompleter.with_inclusions(["-", "_"])
    c.insert(["test-hyphen", "test_underscore"])
    assert c.complete("te", 2) == [
        _s("test-hyphen", 0, 2),
        _s("test_underscore", 0, 2),
    ]


def test_clear_word_count_and_size():
    c = DefaultCompleter()
    c.insert(HEROES)
    assert c.word_count() == 5
    assert c.size() == 24
    c.clear()
    assert c.size() == 1
    assert c.word_count() == 0


def test_min_word_len():
    words = ["one", "two", "three", "four", "five"]
    c = DefaultCompleter().set_min_word_len(4)
    c.insert(words)
    assert c.word_count() == 3
    assert c.min_word_len == 4

    c = DefaultCompleter().set_min_word_len(1)
    c.insert(words)
    assert c.word_count() == 5


def test_with_word_len_constructor():
    c = DefaultCompleter.with_word_len(["one", "two", "three", "four", "five"], 4)
    assert c.word_count() == 3


def test_non_ascii():
    c = DefaultCompleter()
    c.insert(["ｎｕｓｈｅｌｌ", "ｎｕｌｌ", "ｎｕｍｂｅｒ"])
    assert c.complete("ｎ", 3) == [
        _s("ｎｕｌｌ", 0, 3),
        _s("ｎｕｍｂｅｒ", 0, 3),
        _s("ｎｕｓｈｅｌｌ", 0, 3),
    ]


def test_start_strings_with_base_ranges():
    c = DefaultCompleter()
    c.insert(["this is the reedline crate", "test"])
    buffer = "this is t"
    suggestions, ranges = c.complete_with_base_ranges(buffer, 9)
    assert suggestions == [
        _s("test", 8, 9),
        _s("this is the reedline crate", 8, 9),
        _s("this is the reedline crate", 0, 9),
    ]
    assert ranges == [range(8, 9), range(0, 9)]
    assert [buffer[r.start : r.stop] for r in ranges] == ["t", "this is t"]


def test_empty_line_gives_nothing():
    c = DefaultCompleter(HEROES)
    assert c.complete("", 0) == []


def test_exact_word_is_not_suggested():
    c = DefaultCompleter(["batman"])
    assert c.complete("batman", 6) == []


def test_text_after_cursor_is_ignored():
    c = DefaultCompleter(HEROES)
    assert c.complete("bat and more", 3) == c.complete("bat", 3)


def test_total_and_partial_consistent():
    c = DefaultCompleter(HEROES)
    full = c.complete("bat", 3)
    assert c.total_completions("bat", 3) == len(full)
    assert c.partial_complete("bat", 3, 1, 1) == full[1:2]


def test_unknown_prefix():
    c = DefaultCompleter(HEROES)
    assert c.complete("xyz", 3) == []