"""Tokenising a command line: operator spacing, word splitting and counting."""

from __future__ import annotations

from mshparse.syntax import QUOTES, WHITESPACE

OPERATORS = "><|"
REDIRECTS = "><"


def _toggle_quote(char: str, quote: str) -> str:
    """Open a quote, or close it when ``char`` matches the open one."""
    if char in QUOTES:
        if not quote:
            return char
        if quote == char:
            return ""
    return quote


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _skip_quoted(text: str, index: int) -> int:
    """Return the index just past the quoted run that starts at ``index``."""
    quote = text[index]
    close = text.find(quote, index + 1)
    return len(text) if close < 0 else close + 1


def trim_line(line: str) -> str:
    """Strip surrounding blanks; an empty result means nothing to run."""
    return line.strip(WHITESPACE)


def count_pipes(line: str) -> int:
    """Count the pipe characters of ``line`` that are outside quotes."""
    quote = ""
    count = 0
    for char in line:
        quote = _toggle_quote(char, quote)
        if char == "|" and not quote:
            count += 1
    return count


def count_operators(line: str) -> int:
    """Count unquoted operators, ``>>`` and ``<<`` counting once each."""
    quote = ""
    count = 0
    index = 0
    size = len(line)
    while index < size:
        char = line[index]
        quote = _toggle_quote(char, quote)
        if char in OPERATORS and not quote:
            count += 1
            if char in REDIRECTS and _char_at(line, index + 1) == char:
                index += 1
        index += 1
    return count


def add_spaces(line: str) -> str:
    """Surround every unquoted operator with a space on each side."""
    pieces: list[str] = []
    quote = ""
    index = 0
    size = len(line)
    while index < size:
        char = line[index]
        if char in QUOTES:
            quote = _toggle_quote(char, quote)
            pieces.append(char)
            index += 1
        elif char in OPERATORS and not quote:
            operator = char
            if char in REDIRECTS and _char_at(line, index + 1) == char:
                operator += char
                index += 1
            pieces.append(f" {operator} ")
            index += 1
        else:
            pieces.append(char)
            index += 1
    return "".join(pieces)


def split_words(text: str) -> list[str]:
    """Split ``text`` on unquoted blanks, keeping quote characters in the words."""
    words: list[str] = []
    current: list[str] = []
    quote = ""
    for char in text:
        quote = _toggle_quote(char, quote)
        if char in WHITESPACE and not quote:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def count_cmds(segment: str) -> int:
    """Count the argument words of the first pipeline stage of ``segment``."""
    count = 0
    index = 0
    size = len(segment)
    in_single = False
    in_double = False

    def consume_word(position: int) -> int:
        nonlocal in_single, in_double
        while position < size:
            char = segment[position]
            if not (in_single or in_double) and (
                char in WHITESPACE or char in OPERATORS
            ):
                break
            if char == "'" and not in_double:
                in_single = not in_single
            elif char == '"' and not in_single:
                in_double = not in_double
            position += 1
        return position

    while index < size:
        while index < size and segment[index] in WHITESPACE:
            index += 1
        if index >= size or segment[index] == "|":
            break
        if segment[index] in REDIRECTS:
            index += 1
            if _char_at(segment, index) and _char_at(segment, index) in REDIRECTS:
                index += 1
            while index < size and segment[index] in WHITESPACE:
                index += 1
        else:
            count += 1
        index = consume_word(index)
    return count


def count_outfiles(segment: str) -> int:
    """Count output redirections before the first pipe of ``segment``."""
    count = 0
    index = 0
    size = len(segment)
    while index < size and segment[index] != "|":
        char = segment[index]
        if char in QUOTES:
            index = _skip_quoted(segment, index)
        elif char == ">":
            if _char_at(segment, index + 1) == ">":
                index += 1
            count += 1
            index += 1
        else:
            index += 1
    return count


def count_infiles(segment: str) -> int:
    """Count ``<`` redirections, not here-documents, before the first pipe."""
    count = 0
    index = 0
    size = len(segment)
    while index < size and segment[index] != "|":
        char = segment[index]
        if char in QUOTES:
            index = _skip_quoted(segment, index)
        elif char == "<" and _char_at(segment, index + 1) == "<":
            index += 2
        elif char == "<":
            count += 1
            index += 1
        else:
            index += 1
    return count


def count_here_doc(segment: str) -> int:
    """Count ``<<`` here-documents before the first pipe of ``segment``."""
    count = 0
    index = 0
    size = len(segment)
    while index < size and segment[index] != "|":
        char = segment[index]
        if char in QUOTES:
            index = _skip_quoted(segment, index)
        elif char == "<" and _char_at(segment, index + 1) == "<":
            count += 1
            index += 2
        else:
            index += 1
    return count