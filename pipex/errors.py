"""Errors reported by pipex, argument checks and opening of the two files."""

from __future__ import annotations

import os
from typing import BinaryIO, Tuple

PREFIX = "\033[31mError:\033[0m "
USAGE_EXAMPLE = "Example: ./pipex file1 'cmd1' 'cmd2' file2"


class PipexError(Exception):
    """Base class for pipex errors; exit_code is the status the program ends with."""

    exit_code = 1


class UsageError(PipexError):
    """The program was given the wrong number of arguments."""

    exit_code = 0

    def __init__(self) -> None:
        super().__init__("Wrong number of arguments.")


class FileError(PipexError):
    """An input or output file could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class CommandNotFoundError(PipexError):
    """No directory on the search path holds the command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


class ProcessError(PipexError):
    """Creating a pipe or starting a process failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _reason(exc: OSError) -> str:
    if exc.strerror:
        return exc.strerror
    return os.strerror(exc.errno) if exc.errno else str(exc)


def check_args(argv) -> Tuple[str, str, str, str]:
    """Check the arguments after the program name: infile, cmd1, cmd2, outfile."""
    args = tuple(argv)
    if len(args) != 4:
        raise UsageError()
    return args  # type: ignore[return-value]


def open_files(infile: str, outfile: str) -> Tuple[BinaryIO, BinaryIO]:
    """Open infile for reading and create or truncate outfile with mode 0644."""
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise FileError(infile, _reason(exc)) from exc
    try:
        fd = os.open(outfile, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        source.close()
        raise FileError(outfile, _reason(exc)) from exc
    return source, os.fdopen(fd, "r+b")


def format_error(error: PipexError) -> str:
    """Return the diagnostic line printed for error."""
    if isinstance(error, UsageError):
        return f"{PREFIX}{error}\n{USAGE_EXAMPLE}\n"
    if isinstance(error, ProcessError):
        return f"{PREFIX}: {error}\n"
    return f"{PREFIX}{error}\n"