# pipex

`pipex` runs two commands joined by a pipe. The first command reads an input
file and the second writes an output file. It does the same job as this shell
line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Examples:

```sh
pipex input.txt "grep error" "wc -l" count.txt
pipex /dev/urandom "cat -e" "head -10" sample.txt
```

Each command is split into words on spaces. Runs of spaces do not produce
empty words. Quotes and backslashes are passed through unchanged. The first
word is looked up in each directory of the `PATH` environment variable, in
order. The first directory that holds an entry of that name is used.

The input file is opened first and then the output file. Any existing output
file is truncated. A missing output file is created with mode `0644`.

### Errors and exit status

Error messages go to standard error and begin with a red `Error:`.

- Passing any number of arguments other than four prints
  `Wrong number of arguments.` and a usage example. The exit status is 0.
- If the input file cannot be opened, `<reason>: <file>` is printed and the
  exit status is 1. The output file is not created in this case. The same
  applies if the output file cannot be created.
- If a command is not found on `PATH`, `command not found: <name>` is
  printed. The other command still runs.
- If a pipe cannot be created, the error is printed and the exit status is 1.
  The same applies if a command cannot be started.

Otherwise `pipex` exits with status 0 once both commands have finished. It
does this whatever the commands' own exit statuses were.

## What it does not do

- It joins exactly two commands. Longer pipelines are not supported.
- It has no here-document mode.
- It does not hand commands to a shell. Redirections, globs, variables and
  quoting inside a command are not interpreted.

## Library use

The pipeline is also available from Python:

```python
from pipex.cli import run_pipeline

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs both commands and
waits for them. It returns a tuple of their two exit statuses. A command that
could not be started is reported on standard error and counts as status 1.
`env` defaults to `os.environ`; it is used for the `PATH` lookup and is also
passed to both commands. `pipex.cli.main(argv=None)` is the command-line entry
point and returns the exit status.

`pipex.paths` provides the command lookup:

- `find_path(env)` returns the non-empty directories listed in `PATH`. It
  returns `None` if `PATH` is not set.
- `resolve_command(cmd, dirs)` returns the first `dir/cmd` that exists. It
  raises `CommandNotFoundError` if there is none, if `cmd` is empty, or if
  `dirs` is `None`.

`pipex.errors` defines the exceptions. All of them derive from `PipexError`,
and each one carries an `exit_code`:

- `UsageError` has exit code 0.
- `FileError` has exit code 1 and the attributes `path` and `reason`.
- `CommandNotFoundError` has exit code 1 and the attribute `command`.
- `ProcessError` has exit code 1 and the attribute `reason`.

The same module also provides these functions:

- `check_args(argv)` checks for exactly four arguments.
- `open_files(infile, outfile)` opens both files as binary file objects.
- `format_error(error)` builds the message that is printed.

### Helper modules

- `pipex.chars` has ASCII classification (`isalpha`, `isdigit`, `isalnum`,
  `isascii`, `isprint`) and case conversion (`toupper`, `tolower`). These
  functions take a one-character string or an integer code.
- `pipex.memory` has byte-buffer operations on `bytes`/`bytearray`: `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memset` and `memmove`. `memmove`
  moves bytes between two offsets inside one buffer.
- `pipex.strings` has string utilities. Among them are `split` (which drops
  empty pieces) and `strtrim`. `strchr`, `strrchr` and `strnstr` return
  indices or `None`. `strlcpy` and `strlcat` are bounded copies and return
  the result and the attempted length. `atoi` does C-style integer parsing
  with 32-bit wrap-around, and `itoa` does the reverse conversion.
- `pipex.output` writes to file descriptors:
  - `putchar_fd`, `putstr_fd` and `putendl_fd` write only to a positive
    descriptor.
  - `putnbr_fd` writes a decimal number.
- `pipex.linkedlist` has `LinkedList`, a singly linked list. It provides
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.