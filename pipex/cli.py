"""Run two commands joined by a pipe, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, List, Mapping, Optional, Sequence, Tuple

from .errors import PipexError, ProcessError, check_args, format_error, open_files
from .paths import find_path, resolve_command
from .strings import split


def _report(error: PipexError) -> None:
    sys.stderr.write(format_error(error))
    sys.stderr.flush()


def _start(
    command: str,
    dirs: Optional[List[str]],
    stdin,
    stdout,
    env: Mapping[str, str],
) -> Optional[subprocess.Popen]:
    """Start one stage; report and return None if it cannot be started."""
    args = split(command, " ")
    try:
        executable = resolve_command(args[0] if args else "", dirs)
        return subprocess.Popen(
            args, executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except PipexError as exc:
        _report(exc)
    except OSError as exc:
        _report(ProcessError(exc.strerror or str(exc)))
    return None


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[int, int]:
    """Run `cmd1 < infile | cmd2 > outfile` and return both exit statuses.

    A stage that cannot be started is reported on stderr and counts as status 1;
    the other stage still runs.
    """
    environment = os.environ if env is None else env
    source, target = open_files(infile, outfile)
    with source, target:
        try:
            read_end, write_end = os.pipe()
        except OSError as exc:
            raise ProcessError(exc.strerror or str(exc)) from exc
        dirs = find_path(environment)
        try:
            first = _start(cmd1, dirs, source, write_end, environment)
            second = _start(cmd2, dirs, read_end, target, environment)
        finally:
            os.close(read_end)
            os.close(write_end)
        return tuple(  # type: ignore[return-value]
            1 if stage is None else stage.wait() for stage in (first, second)
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: pipex file1 cmd1 cmd2 file2."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, cmd1, cmd2, outfile = check_args(args)
        run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    except PipexError as exc:
        _report(exc)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())