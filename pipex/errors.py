"""Errors that end the pipeline, and their messages."""

from __future__ import annotations

import os

COMMAND_NOT_FOUND = 127
NOT_EXECUTABLE = 126


def _describe_code(message: str | None, exit_code: int) -> str:
    if exit_code == COMMAND_NOT_FOUND:
        if message and "/" in message:
            return "no such file or directory"
        return "command not found"
    if exit_code == NOT_EXECUTABLE:
        if message and message[0] in "/.":
            return "is a directory"
        return "permission denied"
    return os.strerror(exit_code)


def format_error(message: str | None, exit_code: int) -> str:
    """Return the diagnostic line printed for ``message`` and ``exit_code``."""
    prefix = f"{message}: " if message else ""
    return f"{prefix}{_describe_code(message, exit_code)}\n"


class PipexError(Exception):
    """A failure that terminates with ``exit_code``."""

    def __init__(self, message: str | None, exit_code: int) -> None:
        super().__init__(message, exit_code)
        self.message = message
        self.exit_code = exit_code

    def describe(self) -> str:
        """Return the diagnostic line for this error."""
        return format_error(self.message, self.exit_code)

    def __str__(self) -> str:
        return self.describe().rstrip("\n")