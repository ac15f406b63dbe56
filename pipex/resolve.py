"""Opening the pipeline's files and finding commands on the search path."""

from __future__ import annotations

import enum
import os
from typing import BinaryIO, Mapping, Optional

from pipex.textops import split_words

USAGE = "./pipex infile cmd cmd outfile"


class UsageError(Exception):
    """Raised when the command line does not have the expected shape."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class OpenMode(enum.IntEnum):
    """How a pipeline file is opened."""

    READ = 0
    TRUNCATE = 1
    APPEND = 2


_FLAGS = {
    OpenMode.READ: os.O_RDONLY,
    OpenMode.TRUNCATE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    OpenMode.APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}

_PY_MODES = {
    OpenMode.READ: "rb",
    OpenMode.TRUNCATE: "wb",
    OpenMode.APPEND: "ab",
}


def open_file(path, mode) -> BinaryIO:
    """Open *path* for the pipeline; files created get permissions 0777."""
    mode = OpenMode(mode)
    fd = os.open(path, _FLAGS[mode], 0o777)
    return os.fdopen(fd, _PY_MODES[mode])


def getenv_value(name: str, env: Mapping[str, str]) -> Optional[str]:
    """Return the value of the first variable whose name starts with *name*."""
    for key, value in env.items():
        if key.startswith(name):
            return value
    return None


def command_argv(cmd: str) -> list[str]:
    """Split a command string on spaces into its argument vector."""
    return split_words(cmd, " ")


def find_command(cmd: str, env: Mapping[str, str]) -> str:
    """Return the first executable for *cmd* in the PATH directories.

    If none is found, *cmd* itself is returned unchanged.
    """
    search = getenv_value("PATH", env)
    words = command_argv(cmd)
    if search is None or not words:
        return cmd
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{words[0]}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return cmd