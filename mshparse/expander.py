"""Variable expansion and quote removal for argument and file-name words."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from mshparse.lexer import split_words
from mshparse.models import Redirection
from mshparse.shell_state import ShellState
from mshparse.spans import (
    DollarSpan,
    QuoteSpan,
    find_dollar_spans,
    find_quote_spans,
    has_quote,
    quote_containing,
    quote_ending_at,
    strictly_inside,
)
from mshparse.syntax import WHITESPACE

_BLANKS = " \t"


def mark_ambiguous(redirections: Iterable[Redirection], name: Optional[str]) -> None:
    """Flag every redirection whose file word is ``$name`` as ambiguous."""
    if name is None:
        return
    for redirection in redirections:
        if redirection.matches_variable(name):
            redirection.ambiguous = True


def _fields(value: str) -> list[str]:
    """Split ``value`` on runs of blanks, dropping empty pieces."""
    return [piece for piece in value.translate({ord(c): " " for c in WHITESPACE}).split(" ") if piece]


def _only_blanks(value: str) -> bool:
    return all(char in _BLANKS for char in value)


def _variable_name(text: str, span: DollarSpan) -> Optional[str]:
    return text[span.start + 1 : span.end + 1] or None


def _lone_dollar(text: str, span: DollarSpan, quotes: Sequence[QuoteSpan]) -> str:
    """A ``$`` with no name stays literal inside quotes or at the end of the word."""
    if span.end == span.start and (
        strictly_inside(span.start, quotes) or span.end + 1 >= len(text)
    ):
        return "$"
    return ""


def _expand_for_argument(
    text: str, span: DollarSpan, quotes: Sequence[QuoteSpan], state: ShellState
) -> str:
    name = _variable_name(text, span)
    value = state.lookup(name)
    if value is not None:
        return value
    path = state.path_fallback(name)
    if path:
        return path
    if name == "?":
        return str(state.status)
    if name is None:
        return _lone_dollar(text, span, quotes)
    return ""


def _expand_for_file(
    text: str,
    span: DollarSpan,
    quotes: Sequence[QuoteSpan],
    state: ShellState,
    redirections: Sequence[Redirection],
) -> str:
    name = _variable_name(text, span)
    value = state.lookup(name)
    if value is not None:
        fields = _fields(value)
        prefix = ""
        if not fields and _only_blanks(value):
            mark_ambiguous(redirections, name)
            prefix = value
        if len(fields) > 1:
            mark_ambiguous(redirections, name)
        return prefix + value
    path = state.path_fallback(name)
    if path:
        return path
    if name is None:
        return _lone_dollar(text, span, quotes)
    if name == "?":
        return str(state.status)
    mark_ambiguous(redirections, name)
    return ""


def _expand_dollar(
    text: str,
    span: DollarSpan,
    quotes: Sequence[QuoteSpan],
    state: ShellState,
    redirections: Sequence[Redirection],
    for_files: bool,
) -> str:
    literal = text[span.start : span.end + 1]
    quote = quote_containing(span.start, quotes)
    if quote == "'":
        return literal
    if quote == '"' and quote_ending_at(span.start + 1, quotes) == '"':
        return literal
    if for_files:
        return _expand_for_file(text, span, quotes, state, redirections)
    return _expand_for_argument(text, span, quotes, state)


def expand_word(
    text: str,
    state: ShellState,
    redirections: Optional[Sequence[Redirection]] = None,
    for_files: bool = False,
) -> str:
    """Expand ``$`` references in ``text`` and remove its quotes.

    With ``for_files`` set, references that would not give exactly one file
    name mark the matching entries of ``redirections`` as ambiguous.
    """
    targets: Sequence[Redirection] = redirections if redirections is not None else ()
    quotes = find_quote_spans(text)
    dollars = iter(find_dollar_spans(text))
    pending = next(dollars, None)
    pieces: list[str] = []
    index = 0
    while index < len(text):
        if pending is not None and index == pending.start:
            pieces.append(
                _expand_dollar(text, pending, quotes, state, targets, for_files)
            )
            index = pending.end + 1
            pending = next(dollars, None)
            continue
        char = text[index]
        if char != quote_containing(index, quotes):
            pieces.append(char)
        index += 1
    return "".join(pieces)


def _expand_all(
    words: Optional[Iterable[str]],
    state: ShellState,
    redirections: Optional[Sequence[Redirection]],
    for_files: bool,
) -> list[str]:
    result: list[str] = []
    for word in words or ():
        expanded = expand_word(word, state, redirections, for_files)
        if has_quote(word):
            result.append(expanded)
        else:
            result.extend(split_words(expanded))
    return result


def expand_arguments(
    words: Optional[Iterable[str]],
    state: ShellState,
    redirections: Optional[Sequence[Redirection]] = None,
) -> list[str]:
    """Expand argument words; unquoted results are split into several words."""
    return _expand_all(words, state, redirections, for_files=False)


def expand_filenames(
    words: Optional[Iterable[str]],
    state: ShellState,
    redirections: Optional[Sequence[Redirection]] = None,
) -> list[str]:
    """Expand redirection file words, flagging ambiguous ones in ``redirections``."""
    return _expand_all(words, state, redirections, for_files=True)