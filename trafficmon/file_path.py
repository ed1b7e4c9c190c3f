"""Splitting a file path into directory, name and extension parts."""

from __future__ import annotations

from trafficmon.text_utils import string_transform

_SEPARATORS = "\\/"


def _rfind_last_separator(text: str, end: int | None = None) -> int:
    """Index of the last slash or backslash at or before ``end``, or -1."""
    stop = len(text) if end is None else end + 1
    return max(text.rfind(sep, 0, stop) for sep in _SEPARATORS)


def _rfind_preferring_backslash(text: str) -> int:
    index = text.rfind("\\")
    if index == -1:
        index = text.rfind("/")
    return index


class FilePathHelper:
    """Answers questions about the parts of a stored file path."""

    def __init__(self, file_path: str = ""):
        self.file_path = file_path

    def __repr__(self) -> str:
        return f"FilePathHelper({self.file_path!r})"

    def file_extension(self, upper: bool = False, with_dot: bool = False) -> str:
        """The extension, lower case unless ``upper``; '' if there is none."""
        index = self.file_path.rfind(".")
        if index == -1 or index == len(self.file_path) - 1:
            return ""
        extension = self.file_path[index if with_dot else index + 1:]
        return string_transform(extension, upper)

    def file_name(self) -> str:
        """The part after the last directory separator."""
        return self.file_path[_rfind_preferring_backslash(self.file_path) + 1:]

    def file_name_without_extension(self) -> str:
        """The file name with its extension removed."""
        dot = self.file_path.rfind(".")
        start = _rfind_preferring_backslash(self.file_path) + 1
        if dot == -1 or dot < start:
            return self.file_path[start:]
        return self.file_path[start:dot]

    def folder_name(self) -> str:
        """The name of the directory that holds the file, or ''."""
        index = _rfind_last_separator(self.file_path)
        if index <= 0:
            return ""
        index1 = _rfind_last_separator(self.file_path, index - 1)
        if index1 <= 0:
            return ""
        return self.file_path[index1 + 1:index]

    def dir(self) -> str:
        """The directory part including its trailing separator."""
        if self.file_path and self.file_path[-1] in _SEPARATORS:
            return self.file_path
        return self.file_path[:_rfind_preferring_backslash(self.file_path) + 1]

    def parent_dir(self) -> str:
        """The directory above ``dir()``, with a trailing separator."""
        directory = self.dir()
        if directory and directory[-1] in _SEPARATORS:
            directory = directory[:-1]
        return self.file_path[:_rfind_preferring_backslash(directory) + 1]

    def replace_file_extension(self, new_extension: str | None) -> str:
        """Swap the extension in place and return the new path.

        An empty or missing extension removes the current one.
        """
        path = self.file_path
        dot = path.rfind(".")
        backslash = path.rfind("\\")
        if dot == -1 or (backslash != -1 and dot < backslash):
            path += "."
        elif dot != len(path) - 1:
            path = path[:dot + 1]
        if not new_extension:
            if path.endswith("."):
                path = path[:-1]
        else:
            path += new_extension
        self.file_path = path
        return path

    def file_path_without_extension(self) -> str:
        """The whole path up to its last dot."""
        dot = self.file_path.rfind(".")
        return self.file_path if dot == -1 else self.file_path[:dot]