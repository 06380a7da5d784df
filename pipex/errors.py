"""Errors raised while setting up or running a pipeline."""

from __future__ import annotations


class PipexError(Exception):
    """Base class for every failure that makes the program exit unsuccessfully."""

    exit_status = 1


class ArgumentCountError(PipexError):
    """The command line holds too few arguments."""

    def __init__(self, message: str = "Error: wrong number of arguments") -> None:
        super().__init__(message)


class CommandNotFoundError(PipexError):
    """No directory of the search path holds the requested command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


class EmptyCommandError(PipexError):
    """A command argument holds no words at all."""

    def __init__(self, message: str = "access denied:") -> None:
        super().__init__(message)