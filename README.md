# pipex

`pipex` behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

It reads `infile` and passes it to `cmd1`. The output of `cmd1` goes to `cmd2`,
and `pipex` writes the output of `cmd2` to `outfile`. If `outfile` does not
exist, `pipex` creates it with mode `0644`. If it exists, `pipex` empties it
first.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

- The command takes exactly four arguments. With any other number it prints
  `Error! Commands not valid` on standard error and exits with status 1.
- If the process environment is empty, `pipex` exits with status 1 and runs
  nothing.
- Each command is split on spaces and runs of spaces. Quotes and escapes are
  not parsed.
- A command's first word is used as given when it names an executable file.
  Otherwise `pipex` searches the directories of `PATH` in order.
- The exit status is normally that of `cmd2`. If a signal ended `cmd2`, the
  status is 128 plus the signal number.
- If `infile` cannot be opened, or `cmd1` cannot be found or started, the error
  goes to standard error. `cmd2` still runs, on empty input.
- If `outfile` cannot be opened, `pipex` exits with status 1.
- If `cmd2` cannot be found or started, `pipex` exits with status 127.

## Library use

```python
import os

from pipex.cli import PipexError, run_pipeline
from pipex.paths import CommandNotFoundError, build_argv, get_env, resolve_command
from pipex.printf import render

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))

build_argv("grep  -n  foo")                        # ["grep", "-n", "foo"]
get_env("PATH", {"PATH": "/usr/bin:/bin"})         # "/usr/bin:/bin"
resolve_command("ls", {"PATH": "/usr/bin:/bin"})   # first match, e.g. "/usr/bin/ls"
render("%s has %d items (0x%x)", "list", 3, 255)   # "list has 3 items (0xff)"
```

- `run_pipeline` returns the exit status of the second command. It raises
  `PipexError`, which carries an `exit_code`, when the output file cannot be
  opened or the second command cannot be run.
- `resolve_command` raises `CommandNotFoundError` when no executable is found.
- `pipex.printf.render` handles the conversions `%c %s %d %i %u %x %X %p %%`.
  Unknown conversions produce nothing. `pipex.printf.printf` writes the same
  text to standard output and returns its length.
- `pipex.strutil` holds the string helpers that the rest of the package uses:
  `atoi`, `split`, `strtrim`, `substr`, `strnstr`, `itoa` and `strncmp`.

## Limitations

`pipex` joins exactly two commands. It has:

- no here-document input,
- no pipelines of more than two stages,
- no quoting or shell syntax inside the command strings.

## Tests

```sh
pip install ".[test]"
pytest
```