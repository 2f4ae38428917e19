# minishell

A small interactive shell loop, together with the pieces a shell is built
from: quote handling and `$VAR` expansion, builtin commands, a shell
environment, a buffered line reader and two printf-style formatters.

## Installing

```
pip install .
```

Add the `test` extra to get the test tools as well:

```
pip install ".[test]"
```

## Running

```
minishell
```

The command prints the prompt `Promting (write whatever): ` and reads one
line at a time from standard input. For each line it writes the line and a
short trace of its processing steps to standard error, and records status 0.
A line that begins with `exit` or `adios` ends the loop; the command then
returns the last status it recorded (2 if no line was processed). The end of
input also ends the loop.

## What it does not do

The prompt loop does not tokenize or execute what is typed. Lines are not
expanded, no builtin is run from the prompt and no external program is
started. There are no pipes, redirections, signals or history. The expansion
functions and the builtins below work when called from Python, but
`minishell.cli` does not connect them to the prompt.

## Using it as a library

- `minishell.text`: the ASCII character classes `is_alpha`, `is_digit`,
  `is_alnum`, `is_space` and `is_print`; `atoi`; `strtrim`; `split` (drops
  empty words); `strnstr`, which returns an index or `None`; `strncmp`; and
  `ultra_split(text, skip, next_word)`, which splits a string with two
  scanner functions. Each scanner takes the text and a position and returns
  a new position. `no_skip` and `skip_space` are ready-made separator
  scanners.
- `minishell.lines`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream in chunks of `buffer_size` and gives back one line per
  `readline()` call, newline included. It returns `None` at the end of the
  stream and can also be iterated.
- `minishell.printf`: `format_simple(fmt, *args)` and
  `write_simple(stream, fmt, *args)` handle `%c %s %p %d %i %u %x %X %%`.
  `%s` of `None` prints `(null)`. An unknown conversion drops the `%`.
- `minishell.fdprintf`: `format_flags(fmt, *args)` adds width, `.precision`
  and the `-`, `0`, `#`, `+` and space flags. `fd_printf(fd, fmt, *args)`
  writes the result to a file descriptor and returns the number of bytes.
  It raises `ValueError` for a descriptor outside `0..16`.
  `parse_spec(fmt, pos)` reads a single conversion into a `FormatSpec`.
- `minishell.environment`: `Environment` is an ordered collection of
  variables. It has `find`, `get`, `change`, `add`, `append` and `erase`, and
  `Environment.from_strings` builds one from `NAME=value` strings. A lookup
  matches the first variable whose name starts with the key. `Shell` holds
  the environment, the last `status` and a `finished` flag.
- `minishell.expansion`: `expand_str(text, shell)` and
  `expand_array(words, shell)` handle quotes and expansion:
  - single-quoted text is taken literally;
  - double-quoted text has `$NAME` and `$?` expanded and stays one word;
  - unquoted text is expanded and then split on whitespace.

  `next_word`, `next_var` and `next_quote` are the scanners they use, and
  `is_varstart` tells whether a character may start a variable name after
  `$`.
- `minishell.builtins`: `lookup(name)` returns the builtin for `cd`, `echo`,
  `env`, `exit`, `export`, `pwd` or `unset`, or `None`. Each builtin takes
  `(argv, shell)`, where `argv[0]` is the command name. It writes to standard
  output and standard error and returns an exit status.
  - `builtin_echo` honours `-n`.
  - `builtin_export` accepts `NAME`, `NAME=value` and `NAME+=value`, and
    lists the variables when given no arguments.
  - `builtin_exit` sets `shell.finished` and returns the status reduced to
    0–255.
  - `cd`, `export`, `pwd` and `unset` take no options.

```python
from minishell.environment import Environment, Shell
from minishell.expansion import expand_str

shell = Shell(env=Environment.from_strings(["HOME=/home/user"]))
print(expand_str("'$HOME' stays", shell))   # ['$HOME', 'stays']
print(expand_str('"$HOME/x" y', shell))     # ['/home/user/x', 'y']
```

## Tests

```
pytest
```