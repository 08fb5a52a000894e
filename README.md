# minish

Pieces of a small POSIX-style shell, usable as a library. It has no
dependencies outside the standard library.

## Modules

- `minish.quoting` tracks single and double quotes (`QuoteState`, with
  `feed`, `reset` and `is_open`) and finds what sits outside quotes:
  redirection operators `<`, `>`, `<<`, `>>` (`is_operator`,
  `is_redirection`, `count_operators`, `operator_char_indexes`) and token
  separators, which add `|` and the space (`is_separator`,
  `separator_char_indexes`). `all_quote_closed` tells whether every quote in
  a line is closed; `count_operator_tokens` and `count_redirect_files` count
  operator tokens and the file names that follow them.
- `minish.text` holds string helpers: `trim` strips surrounding whitespace
  and collapses inner runs, `count_useless_spaces`, `join_with`, `join3`,
  `substring`, `slice_tokens` and `error_message`.
- `minish.splitting` splits a command line while honouring quotes.
  `split_quoted(s, c)` splits on one character and removes the quote
  characters; `split_tokens(s)` cuts a line into words, redirections and
  pipes, keeping the quotes.
- `minish.chunks` holds parsed command chunks (`Chunk`, `ChunkType`,
  `create_chunk`) and renders them as text for inspection
  (`describe_chunks`, `dump_chunks`).
- `minish.validation` rejects malformed input: a lone operator
  (`check_simple`), an operator directly followed by a redirection
  (`check_triple`, accepting `<>`), and a pipe right after a chunk that
  ends in a redirection (`check_redir_pipe`). `check_user_input` runs all
  three. Errors are raised as `ShellSyntaxError`, whose message is the one
  a shell prints and whose `token` attribute names the offending token.
- `minish.environment` keeps variables in insertion order
  (`Environment`: `from_strings`, `get`, `exists`, `set`, `unset`,
  `to_list`, `sorted_entries`, `format`); `is_valid_key` checks a name.
- `minish.builtins` provides `echo`, `cd`, `pwd`, `export`, `unset`,
  `print_env` (the `env` command) and `exit_builtin`, which raises
  `ShellExit` carrying the exit status. `is_builtin` tells whether a name is
  one of these commands. Each takes optional output and error streams and
  returns a status code.
- `minish.signals` holds `SignalState`: `install` makes Ctrl-C record status
  130 and print a newline, ignores Ctrl-\ and returns the previous handlers;
  `reset` clears the recorded signal.

## Example

```python
import sys
from minish.environment import Environment
from minish.builtins import echo, export
from minish.splitting import split_tokens
from minish.validation import ShellSyntaxError, check_user_input
from minish.chunks import create_chunk

env = Environment.from_strings(["HOME=/home/user", "LANG=C"])
export(env, ["export", "GREETING=hello"], sys.stdout, sys.stderr)
echo(env, ["echo", "$GREETING", "world"], sys.stdout, sys.stderr)
# hello world

print(split_tokens('cat "a b" >> out | wc'))
# ['cat', '"a b"', '>>', 'out', '|', 'wc']

try:
    check_user_input([create_chunk([">"])])
except ShellSyntaxError as exc:
    print(exc)
# bash: syntax error near unexpected token `newline'
```

## What it does not do

There is no prompt loop and no command to run: the package does not read
lines interactively, does not start programs, and does not carry out pipes
or redirections. Variable expansion happens only inside `echo`, for words
that start with `$` or `~`.

## Tests

Install with the `test` extra and run `pytest`.