"""Turning a command argument into an executable path and its argument list."""

from __future__ import annotations

import os
from typing import Mapping

from pipex.errors import CommandNotFoundError, EmptyCommandError
from pipex.text import split


def search_path(env: Mapping[str, str]) -> list[str]:
    """The directories named by ``PATH`` in ``env``, empty entries left out."""
    value = env.get("PATH")
    if value is None:
        return []
    return split(value, ":")


def find_executable(name: str, env: Mapping[str, str]) -> str:
    """Return the first ``<dir>/<name>`` on the search path that exists.

    Raises CommandNotFoundError when no directory holds ``name``.
    """
    for directory in search_path(env):
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFoundError(name)


def resolve_command(command_line: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split ``command_line`` on spaces and locate its program.

    A first word naming an existing file is used as it is; otherwise it is
    looked up on the search path. Returns the executable path and the words.
    """
    words = split(command_line, " ")
    if not words:
        raise EmptyCommandError()
    program = words[0]
    if os.path.exists(program):
        return program, words
    return find_executable(program, env), words