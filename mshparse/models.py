"""Data structures produced by the parser for one pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class RedirectionType(IntEnum):
    """Direction of a file redirection."""

    INPUT = 0
    OUTPUT = 1


@dataclass
class Redirection:
    """A file redirection in the order it appeared on the command line.

    ``file_name`` holds the word as written, before expansion; ``ambiguous``
    is set when expanding it would not yield exactly one file name.
    """

    file_name: str
    type: RedirectionType
    append: bool = False
    ambiguous: bool = False

    @property
    def is_output(self) -> bool:
        """Tell whether this redirection writes to its file."""
        return self.type is RedirectionType.OUTPUT

    def matches_variable(self, name: str) -> bool:
        """Tell whether the file word is ``$`` followed by exactly ``name``."""
        return self.file_name[1:] == name


@dataclass
class Command:
    """One stage of a pipeline: its arguments, files and here-documents.

    The ``raw_*`` lists keep the words as typed, quotes and ``$`` references
    intact; the plain lists hold the words after expansion.
    """

    tokens: list[str] = field(default_factory=list)
    words: list[str] = field(default_factory=list)
    raw_words: list[str] = field(default_factory=list)
    infiles: list[str] = field(default_factory=list)
    raw_infiles: list[str] = field(default_factory=list)
    here_docs: list[str] = field(default_factory=list)
    outfiles: list[str] = field(default_factory=list)
    raw_outfiles: list[str] = field(default_factory=list)
    append: bool = False
    last_in_is_here_doc: bool = False
    node_count: int = 1
    redirections: list[Redirection] = field(default_factory=list)

    def add_redirection(self, redirection: Redirection) -> None:
        """Append ``redirection`` after the ones already recorded."""
        self.redirections.append(redirection)