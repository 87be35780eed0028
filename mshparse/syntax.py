"""Syntax checks run on a trimmed command line before it is parsed."""

from __future__ import annotations

from typing import Optional

from mshparse.shell_state import ShellState

WHITESPACE = " \t\n\v\f\r"
QUOTES = "'\""
_REDIRECT_TERMINATORS = "><|#&;"


class ShellSyntaxError(Exception):
    """A command line was rejected; ``token`` is the offending token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"syntax error near unexpected token '{token}'")


def _toggle(char: str, quote: str) -> str:
    # Any quote character flips the state, even inside the other kind of quote.
    if char in QUOTES:
        return "" if quote == char else char
    return quote


def _skip_blanks(line: str, index: int) -> int:
    while index < len(line) and line[index] in WHITESPACE:
        index += 1
    return index


def check_quotes(line: str) -> Optional[str]:
    """Return the quote character left unclosed in ``line``, or None."""
    quote = ""
    for char in line:
        if char in QUOTES:
            if not quote:
                quote = char
            elif quote == char:
                quote = ""
    return quote or None


def invalid_pipe(line: str) -> bool:
    """Tell whether ``line`` has a leading, trailing or doubled pipe."""
    quote = ""
    for index, char in enumerate(line):
        quote = _toggle(char, quote)
        if quote or char != "|":
            continue
        if index == 0:
            return True
        after = _skip_blanks(line, index + 1)
        if after == len(line) or line[after] == "|":
            return True
    return False


def invalid_redirection(line: str) -> Optional[str]:
    """Return the last redirection character if any redirection is malformed."""
    quote = ""
    last = ""
    bad = False
    size = len(line)
    index = 0
    while index < size:
        char = line[index]
        quote = _toggle(char, quote)
        if not quote and char in "><":
            last = char
            following = line[index + 1] if index + 1 < size else ""
            if following and following in "><":
                if following != char:
                    bad = True
                else:
                    index += 1
            after = _skip_blanks(line, index + 1)
            if after == size or line[after] in _REDIRECT_TERMINATORS:
                bad = True
            index = after - 1
        index += 1
    return last if bad else None


def check_syntax(line: str, state: ShellState) -> None:
    """Raise ShellSyntaxError for a bad line, setting the exit status to 2."""
    quote = check_quotes(line)
    if quote:
        state.set_status(2)
        raise ShellSyntaxError(quote)
    if invalid_pipe(line):
        state.set_status(2)
        raise ShellSyntaxError("|")
    redirection = invalid_redirection(line)
    if redirection:
        state.set_status(2)
        raise ShellSyntaxError(redirection)