"""Command lookup: environment access, argument splitting and PATH search."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.strutil import split


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be located as an executable file."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command!r}")
        self.command = command


def get_env(name: str, env: Mapping[str, str]) -> str | None:
    """Return the value of ``name`` in ``env``, or None when it is not set."""
    return env.get(name)


def build_argv(command: str) -> list[str]:
    """Split a command line on spaces into an argument vector."""
    return split(command, " ")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def resolve_command(cmd: str, env: Mapping[str, str]) -> str:
    """Locate the executable for ``cmd``.

    ``cmd`` itself is used when it names an executable; otherwise its first
    word is looked up in each directory of ``PATH`` in order.
    """
    words = build_argv(cmd) if cmd else []
    if not words:
        raise CommandNotFoundError(cmd)
    if _is_executable(cmd):
        return cmd
    search_path = get_env("PATH", env)
    directories = split(search_path, ":") if search_path else []
    for directory in directories:
        candidate = f"{directory}/{words[0]}"
        if _is_executable(candidate):
            return candidate
    raise CommandNotFoundError(cmd)