"""Locating the executable that a command name refers to."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.errors import COMMAND_NOT_FOUND, NOT_EXECUTABLE, PipexError
from pipex.libft.strings import split

Environment = "Mapping[str, str] | Iterable[str]"


def getenv(envp: Mapping[str, str] | Iterable[str], name: str) -> str | None:
    """Return the value of ``name`` in ``envp``, or None.

    ``envp`` is either a mapping or a sequence of ``NAME=value`` entries.
    """
    if isinstance(envp, Mapping):
        return envp.get(name)
    prefix = name + "="
    for entry in envp:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None


def is_directory(path: str) -> bool:
    """Return True if ``path`` can be opened as a directory."""
    flag = getattr(os, "O_DIRECTORY", None)
    if flag is None:
        return os.path.isdir(path)
    try:
        fd = os.open(path, os.O_RDONLY | flag)
    except OSError:
        return False
    os.close(fd)
    return True


def search_paths(paths: Iterable[str], cmd: str) -> str | None:
    """Return the first ``dir/cmd`` that is executable, or None."""
    for directory in paths:
        full = f"{directory}/{cmd}"
        if os.access(full, os.X_OK):
            return full
    return None


def _check_explicit_path(cmd: str) -> str:
    if not os.access(cmd, os.F_OK):
        raise PipexError(cmd, COMMAND_NOT_FOUND)
    if is_directory(cmd):
        if cmd[0] in "/.":
            raise PipexError(cmd, NOT_EXECUTABLE)
        raise PipexError(cmd, COMMAND_NOT_FOUND)
    if not os.access(cmd, os.X_OK):
        raise PipexError(cmd, NOT_EXECUTABLE)
    return cmd


def find_path(cmd: str, envp: Mapping[str, str] | Iterable[str]) -> str | None:
    """Find the executable for ``cmd``.

    A name holding a slash is checked as given; otherwise the directories of
    PATH are searched. Raises PipexError when PATH is unset or empty, or when
    an explicit path is missing, a directory or not executable.
    """
    if "/" in cmd:
        return _check_explicit_path(cmd)
    env_path = getenv(envp, "PATH")
    if not env_path:
        raise PipexError(cmd, COMMAND_NOT_FOUND)
    return search_paths(split(env_path, ":"), cmd)


def resolve_command(cmd: str, envp: Mapping[str, str] | Iterable[str]) -> str:
    """Return the path to execute for ``cmd`` or raise PipexError.

    An explicit path that cannot be executed fails with 126 when it exists
    and 127 otherwise; a name not found in PATH, or found as a directory,
    fails with 127.
    """
    if "/" in cmd:
        if not os.access(cmd, os.X_OK):
            if os.path.exists(cmd):
                raise PipexError(cmd, NOT_EXECUTABLE)
            raise PipexError(cmd, COMMAND_NOT_FOUND)
        return cmd
    path = find_path(cmd, envp)
    if path is None:
        raise PipexError(None, COMMAND_NOT_FOUND)
    if is_directory(path):
        raise PipexError(cmd, COMMAND_NOT_FOUND)
    return path