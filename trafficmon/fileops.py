"""File system helpers: logging, reading files and locating directories."""

from __future__ import annotations

import datetime
import os
import shutil
import sys
import tempfile


def write_log(text: str, file_path: str | os.PathLike) -> None:
    """Append a time-stamped line to a log file."""
    now = datetime.datetime.now()
    stamp = "%d/%.2d/%.2d %.2d:%.2d:%.2d.%.3d: " % (
        now.year, now.month, now.day, now.hour, now.minute, now.second, now.microsecond // 1000,
    )
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    with open(file_path, "a", encoding="utf-8") as log_file:
        log_file.write(stamp + text + "\n")


def read_file_content(file_path: str | os.PathLike, binary: bool = True) -> bytes | str:
    """Whole contents of a file: bytes in binary mode, text otherwise.

    Raises OSError when the file cannot be opened.
    """
    if binary:
        with open(file_path, "rb") as handle:
            return handle.read()
    with open(file_path, "r", encoding="utf-8", errors="replace") as handle:
        return handle.read()


def list_files(path: str | os.PathLike) -> list[str]:
    """Names of the files and folders directly inside ``path``; empty if it cannot be read."""
    try:
        return [name for name in os.listdir(path) if name not in (".", "..")]
    except OSError:
        return []


def file_exists(file_name: str | os.PathLike) -> bool:
    """Whether a file or directory exists at the path."""
    return os.path.exists(file_name)


def move_file(exist_file: str | os.PathLike, new_file: str | os.PathLike) -> bool:
    """Move a file; False if the source is missing, the target exists or the move fails."""
    if not file_exists(exist_file) or file_exists(new_file):
        return False
    try:
        shutil.move(os.fspath(exist_file), os.fspath(new_file))
    except OSError:
        return False
    return True


def module_dir() -> str:
    """Directory of the running program, with a trailing separator."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.join(os.path.dirname(os.path.abspath(program)), "")


def temp_dir() -> str:
    """The temporary directory, with a trailing separator."""
    result = tempfile.gettempdir()
    if not result.endswith(("\\", "/")):
        result += os.sep
    return result