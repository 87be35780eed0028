import pytest

from mshparse.spans import (
    DollarSpan,
    QuoteSpan,
    count_dollars,
    find_dollar_spans,
    find_quote_spans,
    has_quote,
    is_quoted,
    needs_expansion,
    quote_containing,
    quote_ending_at,
    strictly_inside,
)


def _names(text):
    return [text[s.start + 1 : s.end + 1] for s in find_dollar_spans(text)]


def test_quote_spans_bound_their_quotes():
    text = "echo \"a b\" 'c'"
    spans = find_quote_spans(text)
    assert [s.char for s in spans] == ['"', "'"]
    for span in spans:
        assert text[span.start] == text[span.end] == span.char
    assert all(a.end < b.start for a, b in zip(spans, spans[1:]))


def test_other_quote_inside_span_is_literal():
    text = "\"it's\""
    spans = find_quote_spans(text)
    assert spans == [QuoteSpan(0, len(text) - 1, '"')]


def test_quote_spans_empty_and_unclosed():
    assert find_quote_spans("") == []
    assert find_quote_spans(None) == []
    with pytest.raises(ValueError):
        find_quote_spans("echo 'open")


@pytest.mark.parametrize(
    "text, names",
    [
        ("$HOME/x", ["HOME"]),
        ("$?", ["?"]),
        ("$1abc", ["1"]),
        ("$A_1b", ["A_1b"]),
        ("$A$B", ["A", "B"]),
        ("plain", []),
    ],
)
def test_dollar_span_names(text, names):
    assert _names(text) == names
    assert all(text[s.start] == "$" for s in find_dollar_spans(text))


def test_lone_dollar_spans_one_character():
    text = "a$"
    assert find_dollar_spans(text) == [DollarSpan(len(text) - 1, len(text) - 1)]
    quoted = "$\"x\""
    (span,) = find_dollar_spans(quoted)
    assert span.start == span.end == quoted.index("$")


def test_quote_queries():
    text = "a'$X'b"
    spans = find_quote_spans(text)
    dollar = text.index("$")
    closing = text.rindex("'")
    assert quote_containing(dollar, spans) == "'"
    assert quote_containing(closing, spans) == "'"
    assert quote_containing(0, spans) is None
    assert quote_ending_at(closing, spans) == "'"
    assert quote_ending_at(dollar, spans) is None
    assert strictly_inside(dollar, spans) is True
    assert strictly_inside(closing, spans) is False


@pytest.mark.parametrize(
    "text, expected",
    [("'", False), ("a'b", True), ("ab", False), ("", False), ('x"', True)],
)
def test_has_quote(text, expected):
    assert has_quote(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("'ab'", True), ("'ab\"", False), ('""', True), ("a", False), ("ab'", False)],
)
def test_is_quoted(text, expected):
    assert is_quoted(text) is expected


@pytest.mark.parametrize(
    "words, expected",
    [
        (["echo", "$HOME"], True),
        (["echo", "$ x"], False),
        (["a$"], False),
        ([], False),
        (["'$'x"], True),
    ],
)
def test_needs_expansion(words, expected):
    assert needs_expansion(words) is expected


def test_count_dollars():
    assert count_dollars(["$HOME", "$?"]) == 1
    words = ["$A $1 $_", "$ $?", "x$y"]
    assert count_dollars(words * 2) == 2 * count_dollars(words)
    assert count_dollars([]) == 0