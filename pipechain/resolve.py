"""Turn a command argument into an argument vector and an executable path."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

_ACCESS_MODE = os.F_OK | os.X_OK | os.R_OK


class CommandResolutionError(Exception):
    """Raised when a command word cannot be turned into a runnable file."""


def split_command(arg: str) -> list[str]:
    """Split a command argument on spaces, dropping empty words."""
    return [word for word in arg.split(" ") if word]


def path_directories(env: Mapping[str, str] | None) -> list[str]:
    """Return the non-empty directories listed in the PATH of ``env``."""
    if not env:
        return []
    value = env.get("PATH")
    if value is None:
        return []
    return [directory for directory in value.split(":") if directory]


def join_command(directory: str, name: str) -> str:
    """Join a directory and a command name with a single slash."""
    return f"{directory}/{name}"


def _is_runnable(path: str) -> bool:
    return os.access(path, _ACCESS_MODE)


def search_path(name: str, directories: Sequence[str]) -> str:
    """Return the first ``directory/name`` that exists and is readable and executable."""
    for directory in directories:
        candidate = join_command(directory, name)
        if _is_runnable(candidate):
            return candidate
    raise CommandResolutionError(f"command not found : {name}")


def check_explicit_path(name: str) -> str:
    """Validate a command name that already contains a slash."""
    if name.endswith("/"):
        raise CommandResolutionError(f"{name}: is a directory")
    if not _is_runnable(name):
        raise CommandResolutionError(f"command not found : {name}")
    return name


def resolve_command(words: Sequence[str], env: Mapping[str, str] | None = None) -> str:
    """Return the path of the executable that runs ``words``.

    A name containing a slash is used as given; any other name is looked up
    in the PATH of ``env`` (the process environment when ``env`` is None).
    """
    if not words:
        raise CommandResolutionError("Command '' not found")
    name = words[0]
    if "/" in name:
        return check_explicit_path(name)
    if env is None:
        env = os.environ
    return search_path(name, path_directories(env))