"""Turning a command line into the commands of a pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from mshparse.expander import expand_arguments, expand_filenames
from mshparse.lexer import add_spaces, count_pipes, split_words, trim_line
from mshparse.models import Command, Redirection, RedirectionType
from mshparse.shell_state import ShellState
from mshparse.spans import find_quote_spans, needs_expansion, quote_containing
from mshparse.syntax import check_syntax

MAX_HERE_DOCS = 16
PIPE = "|"
_INPUT = "<"
_HERE_DOC = "<<"
_OUTPUT = ">"
_APPEND = ">>"
_REDIRECTIONS = frozenset({_INPUT, _HERE_DOC, _OUTPUT, _APPEND})


class HereDocLimitError(Exception):
    """A command asked for more here-documents than the shell allows."""

    status = 2

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("maximum here-document count exceeded")


def _strip_quotes(word: str) -> str:
    """Remove the quote characters that delimit quoted regions of ``word``."""
    spans = find_quote_spans(word)
    return "".join(
        char
        for index, char in enumerate(word)
        if char != quote_containing(index, spans)
    )


def prepare_line(line: str, state: ShellState) -> Optional[str]:
    """Trim ``line`` and check its syntax.

    Returns None when there is nothing to run, the trimmed line otherwise;
    raises ShellSyntaxError (setting the exit status) for a malformed line.
    """
    trimmed = trim_line(line)
    if not trimmed:
        return None
    check_syntax(trimmed, state)
    return trimmed


def split_pipeline(tokens: Iterable[str]) -> list[list[str]]:
    """Split a token list on ``|`` tokens into one list per pipeline stage."""
    stages: list[list[str]] = [[]]
    for token in tokens:
        if token == PIPE:
            stages.append([])
        else:
            stages[-1].append(token)
    return stages


def build_command(
    tokens: Sequence[str], state: ShellState, node_count: int = 1
) -> Command:
    """Build the command of one pipeline stage from its tokens.

    Words and file names are expanded when they hold a ``$`` reference and
    otherwise only lose their quotes; here-document delimiters stay raw.
    """
    command = Command(tokens=list(tokens), node_count=node_count)
    stream = iter(tokens)
    for token in stream:
        if token == PIPE:
            break
        if token not in _REDIRECTIONS:
            command.raw_words.append(token)
            command.words.append(_strip_quotes(token))
            continue
        operand = next(stream, None)
        if operand is None:
            break
        if token == _HERE_DOC:
            command.here_docs.append(operand)
            command.last_in_is_here_doc = True
        elif token == _INPUT:
            name = _strip_quotes(operand)
            command.raw_infiles.append(operand)
            command.infiles.append(name)
            command.last_in_is_here_doc = False
            command.add_redirection(Redirection(name, RedirectionType.INPUT))
        else:
            append = token == _APPEND
            name = _strip_quotes(operand)
            command.raw_outfiles.append(operand)
            command.outfiles.append(name)
            command.append = append
            command.add_redirection(
                Redirection(name, RedirectionType.OUTPUT, append=append)
            )

    if needs_expansion(command.raw_words):
        command.words = expand_arguments(
            command.raw_words, state, command.redirections
        )
    if needs_expansion(command.raw_infiles):
        command.infiles = expand_filenames(
            command.raw_infiles, state, command.redirections
        )
    if needs_expansion(command.raw_outfiles):
        command.outfiles = expand_filenames(
            command.raw_outfiles, state, command.redirections
        )
    return command


def check_here_doc_limit(command: Command) -> int:
    """Return the here-document count of ``command``, raising past the limit."""
    count = len(command.here_docs)
    if count > MAX_HERE_DOCS:
        raise HereDocLimitError(count)
    return count


def parse_line(line: str, state: ShellState) -> list[Command]:
    """Parse ``line`` into the commands of its pipeline, in order.

    An empty or blank line gives an empty list; a malformed one raises
    ShellSyntaxError.
    """
    prepared = prepare_line(line, state)
    if prepared is None:
        return []
    node_count = 1 + count_pipes(prepared)
    tokens = split_words(add_spaces(prepared))
    return [
        build_command(stage, state, node_count) for stage in split_pipeline(tokens)
    ]