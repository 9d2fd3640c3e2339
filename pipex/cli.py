"""Run ``infile | cmd1 | cmd2 > outfile`` like a two-stage shell pipeline."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO

from pipex.paths import CommandNotFoundError, build_argv, resolve_command

_NOT_FOUND_STATUS = 127


class PipexError(Exception):
    """A failure that ends the pipeline with a given exit status."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _spawn(
    command: str,
    env: Mapping[str, str],
    stdin: int | IO[bytes],
    stdout: int | IO[bytes],
) -> subprocess.Popen[bytes]:
    """Start ``command``; raise PipexError with status 127 when it cannot run."""
    argv = build_argv(command)
    try:
        path = resolve_command(argv[0] if argv else "", env)
    except CommandNotFoundError:
        raise PipexError("path not found", _NOT_FOUND_STATUS) from None
    try:
        return subprocess.Popen(
            argv, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise PipexError(f"execve: {exc.strerror}", _NOT_FOUND_STATUS) from None


def _start_first(
    infile: str, command: str, env: Mapping[str, str]
) -> subprocess.Popen[bytes] | None:
    """Start the first stage, reporting failures without stopping the pipeline."""
    try:
        source = open(infile, "rb")
    except OSError as exc:
        print(f"Error opening infile: {exc.strerror}", file=sys.stderr)
        return None
    with source:
        try:
            return _spawn(command, env, source, subprocess.PIPE)
        except PipexError as exc:
            print(exc, file=sys.stderr)
            return None


def _status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def run_pipeline(
    infile: str, cmd1: str, cmd2: str, outfile: str, env: Mapping[str, str]
) -> int:
    """Feed ``infile`` through ``cmd1`` and ``cmd2`` into ``outfile``.

    Failures of the first stage are reported on standard error and the
    second stage then reads empty input. Returns the exit status of the
    second command; raises PipexError when the output file cannot be
    opened or the second command cannot be run.
    """
    first = _start_first(infile, cmd1, env)
    try:
        try:
            fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as exc:
            raise PipexError(f"Error opening outfile: {exc.strerror}", 1) from None
        with os.fdopen(fd, "wb") as sink:
            upstream = first.stdout if first is not None else subprocess.DEVNULL
            second = _spawn(cmd2, env, upstream, sink)
        if first is not None and first.stdout is not None:
            first.stdout.close()
        return _status(second.wait())
    finally:
        if first is not None:
            if first.stdout is not None:
                first.stdout.close()
            first.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not os.environ:
        return 1
    if len(args) != 4:
        print("Error! Commands not valid", file=sys.stderr)
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code