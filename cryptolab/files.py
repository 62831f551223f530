"""Working directories for temporary, log and output files, and the session journal."""

from __future__ import annotations

import sys
import time
from enum import Enum
from pathlib import Path
from typing import TextIO


class FileType(Enum):
    """Kind of file, which decides the directory it lives in."""

    TMP = "tmp"
    LOG = "log"
    OUTPUT = "output"


_DIRECTORIES = {
    FileType.TMP: "tmp",
    FileType.LOG: "logs",
    FileType.OUTPUT: "tmp",
}

_TIME_FORMAT = "[%d/%m/%Y-%H:%M:%S] "


def file_dir(file_type: FileType, base: str | Path | None = None) -> Path:
    """Return the directory that holds files of the given type."""
    root = Path(base) if base is not None else Path()
    return root / _DIRECTORIES[file_type]


def _path_in(file_name: str, file_type: FileType, base: str | Path | None) -> Path:
    directory = file_dir(file_type, base)
    directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    return directory / file_name


def create_file(
    file_name: str,
    overwrite: bool = False,
    file_type: FileType = FileType.TMP,
    base: str | Path | None = None,
) -> TextIO:
    """Open a file for writing in its directory, creating both if needed.

    With ``overwrite`` the file is truncated, otherwise it is appended to.
    """
    mode = "w" if overwrite else "a"
    return open(_path_in(file_name, file_type, base), mode, encoding="utf-8")


def open_file_read(
    file_name: str,
    file_type: FileType = FileType.TMP,
    base: str | Path | None = None,
) -> TextIO:
    """Open a file of the given type for reading.

    The directory is created if missing; a missing file raises FileNotFoundError.
    """
    return open(_path_in(file_name, file_type, base), encoding="utf-8")


class Journal:
    """Writes messages to a log stream, optionally echoing them to the terminal."""

    def __init__(self, log_file: TextIO) -> None:
        self.log_file = log_file

    def log(self, msg: str, user_input: bool = False, log_time: bool = True) -> None:
        """Append a message, prefixed with a timestamp and '> ' for user input."""
        parts = []
        if log_time:
            parts.append(time.strftime(_TIME_FORMAT))
        if user_input:
            parts.append("> ")
        parts.append(msg)
        self.log_file.write("".join(parts))

    def echo(self, msg: str, error: bool = False, log_time: bool = True) -> None:
        """Print a message to stdout (or stderr for errors) and log it."""
        stream = sys.stderr if error else sys.stdout
        stream.write(msg)
        self.log(msg, log_time=log_time)