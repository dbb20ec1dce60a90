"""Locating commands on the PATH search list."""

from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional

from .errors import CommandNotFoundError
from .strings import split


def find_path(env: Mapping[str, str]) -> Optional[List[str]]:
    """Return the non-empty directories of PATH in env, or None if PATH is unset."""
    value = env.get("PATH")
    if value is None:
        return None
    return split(value, ":")


def resolve_command(cmd: str, dirs: Optional[Iterable[str]]) -> str:
    """Return dir/cmd for the first directory in dirs where it exists.

    Raises CommandNotFoundError when no directory holds it.
    """
    if cmd:
        for directory in dirs or ():
            candidate = f"{directory}/{cmd}"
            if os.access(candidate, os.F_OK):
                return candidate
    raise CommandNotFoundError(cmd)