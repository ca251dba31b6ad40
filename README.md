# pipex

`pipex` runs two commands joined by a pipe, taking its input from one file
and writing its output to another. It behaves like the shell line

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required; with any other number a usage line is
written to standard error and the exit status is 1.

Examples:

```sh
pipex input.txt "grep error" "wc -l" count.txt
pipex input.txt "tr a-z A-Z" "sort -r" sorted.txt
pipex input.txt "grep 'two words'" cat out.txt
```

### Command lines

A command string is normally split on spaces. If it contains a double quote,
a single quote or a backslash, it is split with quote handling instead:
quoted text stays in one word with the quotes removed, and a backslash makes
the next character literal.

### Finding programs

A command whose name contains `/` is run as given, provided it is
executable. Otherwise each directory of `PATH` is searched for an executable
file of that name; an unset or empty `PATH` means the command is not found.

### Exit status

The exit status is that of the second command, or `128 + signal` if it was
killed by a signal. When a command cannot be started, its status is the
error's status below. Errors are reported on standard error:

| Status | Meaning |
| ------ | ------- |
| 127    | command not found, or no such file or directory |
| 126    | permission denied, or is a directory |
| 1      | the input or output file could not be opened, or was given as an empty name |

The output file is created with mode `0644` and truncated if it exists.

### Limits

`pipex` always runs exactly two commands. It has no here-document mode, no
way to chain more than two commands, and no appending to the output file.

## Library use

The pipeline can also be run from Python:

```python
from pipex.pipeline import Pipeline

status = Pipeline("input.txt", "grep error", "wc -l", "count.txt").run()
```

Without `env`, the current environment is used; a mapping or a list of
`NAME=value` strings may be passed instead.

Other pieces:

- `pipex.pipeline.build_argv` turns a command string into an argument list,
  and `status_from_returncodes` combines two return codes into the exit
  status.
- `pipex.quoting.split_quoted` and `count_words_quoted` split a command line
  with quote handling.
- `pipex.paths.resolve_command` and `find_path` look a program up on `PATH`;
  `getenv` reads a variable from a mapping or a `NAME=value` list.
- `pipex.errors.PipexError` carries a message and an exit status, and
  `format_error` builds the diagnostic line.
- `pipex.libft` holds small helpers: ASCII character tests (`chars`),
  decimal conversion (`conversion`), byte-buffer functions (`memory`),
  string functions (`strings`), a singly linked list (`linked_list`),
  stream output (`output`), a line-at-a-time reader (`line_reader`) and a
  small `printf` (`printf`).

## Tests

```sh
pip install ".[test]"
pytest
```