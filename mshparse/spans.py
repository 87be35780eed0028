"""Locating quoted regions and ``$`` references inside a word."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

QUOTES = "'\""
WHITESPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class QuoteSpan:
    """A quoted region; ``start`` and ``end`` index the quote characters."""

    start: int
    end: int
    char: str


@dataclass(frozen=True)
class DollarSpan:
    """A ``$`` reference; ``end`` is the index of its last character."""

    start: int
    end: int


def _is_alpha(char: str) -> bool:
    return char in string.ascii_letters


def _is_digit_or_underscore(char: str) -> bool:
    return char in string.digits or char == "_"


def find_quote_spans(text: Optional[str]) -> list[QuoteSpan]:
    """Return the quoted regions of ``text`` in order."""
    spans: list[QuoteSpan] = []
    if not text:
        return spans
    index = 0
    while index < len(text):
        char = text[index]
        if char in QUOTES:
            end = text.find(char, index + 1)
            if end < 0:
                raise ValueError(f"unclosed quote {char!r} at index {index}")
            spans.append(QuoteSpan(index, end, char))
            index = end + 1
        else:
            index += 1
    return spans


def find_dollar_spans(text: Optional[str]) -> list[DollarSpan]:
    """Return every ``$`` reference in ``text`` with the extent of its name."""
    spans: list[DollarSpan] = []
    if not text:
        return spans
    size = len(text)
    index = 0
    while index < size:
        if text[index] != "$":
            index += 1
            continue
        start = index
        index += 1
        if index < size and _is_alpha(text[index]):
            while index < size and (
                _is_alpha(text[index]) or _is_digit_or_underscore(text[index])
            ):
                index += 1
        elif index < size and text[index] not in QUOTES:
            index += 1
        spans.append(DollarSpan(start, index - 1))
    return spans


def quote_containing(index: int, spans: Iterable[QuoteSpan]) -> Optional[str]:
    """Return the quote character of the span covering ``index``, quotes included."""
    return next((s.char for s in spans if s.start <= index <= s.end), None)


def quote_ending_at(index: int, spans: Iterable[QuoteSpan]) -> Optional[str]:
    """Return the quote character of the span whose closing quote is at ``index``."""
    return next((s.char for s in spans if s.end == index), None)


def strictly_inside(index: int, spans: Iterable[QuoteSpan]) -> bool:
    """Tell whether ``index`` lies between the quotes of some span."""
    return any(s.start < index < s.end for s in spans)


def has_quote(text: Optional[str]) -> bool:
    """Tell whether a word of two or more characters holds any quote."""
    if not text or len(text) < 2:
        return False
    return any(char in QUOTES for char in text)


def is_quoted(text: Optional[str]) -> bool:
    """Tell whether ``text`` starts and ends with the same quote character."""
    if not text or len(text) < 2:
        return False
    return text[0] in QUOTES and text[0] == text[-1]


def needs_expansion(words: Iterable[Optional[str]]) -> bool:
    """Tell whether any word has a ``$`` followed by a non-blank character."""
    return any(
        first == "$" and second not in WHITESPACE
        for word in words
        if word
        for first, second in zip(word, word[1:])
    )


def count_dollars(words: Sequence[str]) -> int:
    """Count ``$`` signs followed by a letter, digit or underscore."""
    return sum(
        1
        for word in words
        for first, second in zip(word, word[1:])
        if first == "$" and (_is_alpha(second) or _is_digit_or_underscore(second))
    )