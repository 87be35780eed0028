# mshparse

`mshparse` turns one line of shell input into a list of commands that are
ready to run. It covers the front end of a small POSIX-style shell and runs
nothing itself.

## What it does

- **Syntax checks.** The checks reject a line with an unclosed quote, a pipe at
  the start of the line, a pipe followed only by blanks or by another pipe, and
  a redirection that has no target, mixes `<` and `>`, or is followed by one of
  `> < | # & ;`. When a line is rejected, `ShellSyntaxError` is raised and the
  last exit status is set to 2.
- **Tokenising.** Unquoted `|`, `<`, `>`, `<<` and `>>` get a space on each
  side. The line is then split on blanks that are outside quotes, so quoted
  text stays in one word with its quote characters.
- **Pipelines.** The tokens are cut at every `|`. Each stage becomes a
  `Command`. A `Command` holds its argument words, its input files, its
  here-document delimiters (kept as typed) and its output files, with append
  mode for `>>`. It also holds a list of `Redirection` entries in the order
  they were written.
- **Expansion.** `$NAME` is read from the state's variables, and `$?` gives the
  last exit status. If `PATH` is not set, it expands to a built-in default
  search path. Text in single quotes is left as it is. A `$` with no name stays
  literal inside quotes or at the end of a word. Quote characters are then
  removed. A word that had no quotes is split on whitespace after expansion.
  Words that hold no `$` reference only lose their quotes.
- **Ambiguous redirects.** A file word of the form `$NAME` is flagged through
  `Redirection.ambiguous` in three cases: the variable expands to several
  words, it expands only to blanks, or it is not set. The caller can then
  report the redirect.
- **Here-document limit.** `check_here_doc_limit(command)` returns the number
  of here-documents in a command. It raises `HereDocLimitError` when there are
  more than 16. `parse_line` does not call it for you.

## Installing

```
pip install .
```

No third-party libraries are needed. For the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from mshparse.parser import parse_line
from mshparse.shell_state import ShellState
from mshparse.syntax import ShellSyntaxError

state = ShellState.from_mapping({"HOME": "/home/user", "NAME": "world"})

try:
    commands = parse_line('echo "hello $NAME" | cat > out.txt', state)
except ShellSyntaxError as exc:
    print(exc)          # syntax error near unexpected token '...'
else:
    for command in commands:
        print(command.words, command.infiles, command.outfiles)
```

An empty or blank line gives an empty list.

`ShellState` holds the variables and the last exit status:

- `ShellState.lookup` reads a variable.
- `ShellState.path_fallback` supplies the default search path for `PATH`.
- `ShellState.set_status` records a status, which `$?` then expands to.

The stages can also be used on their own:

- `mshparse.syntax`: `check_quotes`, `invalid_pipe`, `invalid_redirection`,
  `check_syntax`, `ShellSyntaxError`
- `mshparse.lexer`: `add_spaces`, `split_words`, `trim_line`, and the
  counting helpers `count_pipes`, `count_operators`, `count_cmds`,
  `count_infiles`, `count_outfiles`, `count_here_doc`
- `mshparse.spans`: `find_quote_spans` and `find_dollar_spans` (giving
  `QuoteSpan` and `DollarSpan`), `quote_containing`, `quote_ending_at`,
  `strictly_inside`, `has_quote`, `is_quoted`, `needs_expansion`,
  `count_dollars`
- `mshparse.expander`: `expand_word`, `expand_arguments`, `expand_filenames`,
  `mark_ambiguous`
- `mshparse.parser`: `prepare_line`, `split_pipeline`, `build_command`,
  `check_here_doc_limit`, `parse_line`, `HereDocLimitError`
- `mshparse.models`: `Command`, `Redirection`, `RedirectionType`

## What it does not do

This is a parsing library, not a shell. Its limits:

- It has no interactive prompt or command to start.
- It does not run commands or provide builtins such as `cd`, `export` or
  `exit`.
- It does not open redirection files.
- It does not read here-document bodies. The delimiters are recorded, and
  reading the text up to them is left to the caller.