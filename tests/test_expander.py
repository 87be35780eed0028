import pytest

from mshparse.expander import (
    expand_arguments,
    expand_filenames,
    expand_word,
    mark_ambiguous,
)
from mshparse.models import Redirection, RedirectionType
from mshparse.shell_state import DEFAULT_PATH, ShellState


@pytest.fixture
def state():
    return ShellState(
        variables={"USER": "alice", "ARGS": "one two", "A": "x", "B": "y"},
        status=42,
    )


def test_unquoted_variable(state):
    assert expand_word("$USER", state) == state.variables["USER"]


def test_double_quoted_variable(state):
    assert expand_word('"$USER"', state) == state.variables["USER"]


def test_single_quotes_keep_reference_literal(state):
    assert expand_word("'$USER'", state) == "$USER"


def test_adjacent_references(state):
    assert expand_word("$A$B", state) == state.variables["A"] + state.variables["B"]


def test_exit_status(state):
    assert expand_word("$?", state) == str(state.status)


def test_exit_status_follows_set_status(state):
    state.set_status(7)
    assert expand_word("$?", state) == str(7)


@pytest.mark.parametrize("word", ["$", '"$"', "'$'"])
def test_lone_dollar_stays(state, word):
    assert expand_word(word, state) == "$"


def test_dollar_before_quotes_vanishes(state):
    assert expand_word('$"x"', state) == "x"


def test_unset_variable_is_empty(state):
    assert expand_word("$NOPE", state) == ""


def test_path_fallback_when_unset(state):
    assert expand_word("$PATH", state) == DEFAULT_PATH


def test_path_from_variables_wins():
    state = ShellState(variables={"PATH": "/opt/bin"})
    assert expand_word("$PATH", state) == "/opt/bin"


def test_quote_removal(state):
    assert expand_word("'a b'", state) == "a b"


def test_other_quote_kept_inside_double_quotes(state):
    assert expand_word('"it\'s"', state) == "it's"


def test_unclosed_quote_raises(state):
    with pytest.raises(ValueError):
        expand_word("'abc", state)


def test_arguments_split_unquoted(state):
    assert expand_arguments(["echo", "$ARGS"], state) == ["echo"] + state.variables[
        "ARGS"
    ].split()


def test_arguments_quoted_not_split(state):
    assert expand_arguments(['"$ARGS"'], state) == [state.variables["ARGS"]]


def test_arguments_unset_unquoted_disappears(state):
    assert expand_arguments(["echo", "$NOPE"], state) == ["echo"]


def test_arguments_empty_input(state):
    assert expand_arguments(None, state) == []


def test_mark_ambiguous_only_matching():
    redirections = [
        Redirection("$F", RedirectionType.OUTPUT),
        Redirection("out", RedirectionType.OUTPUT),
        Redirection("$F", RedirectionType.INPUT),
    ]
    mark_ambiguous(redirections, "F")
    assert [r.ambiguous for r in redirections] == [True, False, True]


def test_filename_multiple_fields_ambiguous():
    state = ShellState(variables={"F": "a b"})
    redirections = [Redirection("$F", RedirectionType.OUTPUT)]
    result = expand_filenames(["$F"], state, redirections)
    assert result == state.variables["F"].split()
    assert redirections[0].ambiguous is True


def test_filename_single_field_not_ambiguous():
    state = ShellState(variables={"F": "out.txt"})
    redirections = [Redirection("$F", RedirectionType.OUTPUT)]
    assert expand_filenames(["$F"], state, redirections) == ["out.txt"]
    assert redirections[0].ambiguous is False


def test_filename_unset_is_ambiguous(state):
    redirections = [Redirection("$NOPE", RedirectionType.INPUT)]
    assert expand_filenames(["$NOPE"], state, redirections) == []
    assert redirections[0].ambiguous is True


def test_filename_status_not_ambiguous(state):
    redirections = [Redirection("$?", RedirectionType.OUTPUT)]
    assert expand_filenames(["$?"], state, redirections) == [str(state.status)]
    assert redirections[0].ambiguous is False


def test_filename_blank_value_ambiguous():
    state = ShellState(variables={"F": "  "})
    redirections = [Redirection("$F", RedirectionType.OUTPUT)]
    result = expand_word("$F", state, redirections, True)
    assert result.strip() == ""
    assert redirections[0].ambiguous is True


def test_argument_mode_never_marks_ambiguous(state):
    redirections = [Redirection("$NOPE", RedirectionType.OUTPUT)]
    assert expand_word("$NOPE", state, redirections, False) == ""
    assert redirections[0].ambiguous is False


def test_single_quoted_filename_not_expanded(state):
    redirections = [Redirection("'$USER'", RedirectionType.OUTPUT)]
    assert expand_filenames(["'$USER'"], state, redirections) == ["$USER"]
    assert redirections[0].ambiguous is False