"""Run ``infile cmd1 | cmd2 > outfile`` with two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence

from pipex.errors import COMMAND_NOT_FOUND, NOT_EXECUTABLE, PipexError, format_error
from pipex.libft.strings import split
from pipex.paths import resolve_command
from pipex.quoting import split_quoted

USAGE = "usage: ./pipex infile cmd1 cmd2 outfile"
_SPECIAL = "\"'\\"
_FAILURE = 1


def build_argv(raw: str) -> list[str]:
    """Turn a command string into an argument vector.

    Strings holding quotes or backslashes go through the quoted splitter;
    others are split on single spaces. Raises PipexError when no command
    name is left.
    """
    if any(ch in raw for ch in _SPECIAL):
        argv = split_quoted(raw)
        if not argv or not argv[0]:
            raise PipexError("malloc", _FAILURE)
        return argv
    argv = split(raw, " ")
    if not argv or not argv[0]:
        raise PipexError(None, COMMAND_NOT_FOUND)
    return argv


def _exit_status(code: int | None) -> int | None:
    if code is None:
        return None
    return code if code >= 0 else 128 - code


def status_from_returncodes(first: int | None, second: int | None) -> int:
    """Return the pipeline's exit status from the two commands' return codes.

    The second command decides; a negative code means death by signal and
    maps to 128 plus the signal number. The first command is used only when
    the second has no status, and 1 when neither has.
    """
    for code in (second, first):
        status = _exit_status(code)
        if status is not None:
            return status
    return _FAILURE


def _environment_dict(env: Mapping[str, str] | Iterable[str]) -> dict[str, str]:
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep:
            result[name] = value
    return result


class Pipeline:
    """Two commands joined by a pipe, reading ``infile`` and writing ``outfile``."""

    def __init__(
        self,
        infile: str,
        cmd1: str,
        cmd2: str,
        outfile: str,
        env: Mapping[str, str] | Iterable[str] | None = None,
    ) -> None:
        self.infile = infile
        self.cmd1 = cmd1
        self.cmd2 = cmd2
        self.outfile = outfile
        if env is None:
            env = dict(os.environ)
        elif not isinstance(env, Mapping):
            env = list(env)
        self.env = env
        self._process_env = _environment_dict(env)

    @staticmethod
    def _report(err: PipexError) -> int:
        sys.stderr.write(err.describe())
        sys.stderr.flush()
        return err.exit_code

    def _spawn(self, raw: str, stdin: int, stdout: int) -> subprocess.Popen | int:
        try:
            argv = build_argv(raw)
            path = resolve_command(argv[0], self.env)
            try:
                return subprocess.Popen(
                    argv,
                    executable=path,
                    stdin=stdin,
                    stdout=stdout,
                    env=self._process_env,
                )
            except PermissionError:
                raise PipexError(path, NOT_EXECUTABLE) from None
            except OSError:
                raise PipexError(argv[0], COMMAND_NOT_FOUND) from None
        except PipexError as err:
            return self._report(err)

    def _first_stage(self, write_fd: int) -> subprocess.Popen | int:
        if not self.infile:
            sys.stderr.write("no such file or directory\n")
            sys.stderr.flush()
            return _FAILURE
        try:
            infile_fd = os.open(self.infile, os.O_RDONLY)
        except OSError:
            return self._report(PipexError(self.infile, _FAILURE))
        try:
            return self._spawn(self.cmd1, infile_fd, write_fd)
        finally:
            os.close(infile_fd)

    def _second_stage(self, read_fd: int) -> subprocess.Popen | int:
        if not self.outfile:
            sys.stderr.write("no such file or directory\n")
            sys.stderr.flush()
            return _FAILURE
        try:
            outfile_fd = os.open(
                self.outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644
            )
        except OSError:
            return self._report(PipexError(self.outfile, _FAILURE))
        try:
            return self._spawn(self.cmd2, read_fd, outfile_fd)
        finally:
            os.close(outfile_fd)

    def run(self) -> int:
        """Run both commands, wait for them and return the exit status."""
        read_fd, write_fd = os.pipe()
        try:
            first = self._first_stage(write_fd)
            second = self._second_stage(read_fd)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        codes = [
            stage.wait() if isinstance(stage, subprocess.Popen) else stage
            for stage in (first, second)
        ]
        return status_from_returncodes(*codes)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        sys.stderr.write(format_error(USAGE, _FAILURE))
        sys.stderr.flush()
        return _FAILURE
    return Pipeline(*args).run()