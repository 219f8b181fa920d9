"""Locating, listing and opening level, save and solution files."""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import IO

_SCREEN_ID = re.compile(r"ScreenID\s*=\s*\+?(\d+)")


class FileType(Enum):
    """Kinds of game file, valued by their extension."""

    LEVEL = ".spg"
    SAVE = ".spp"
    SOLUTION = ".sps"

    @property
    def extension(self) -> str:
        return self.value


class FilesManager:
    """Game files kept in one working directory."""

    def __init__(self, directory: str = "") -> None:
        self.directory = ""
        self.change_directory(directory)

    def change_directory(self, path: str) -> None:
        """Use *path* as the working directory, ending it with a separator."""
        self.directory = path
        if path:
            separator = "/" if "/" in path else "\\"
            if not path.endswith(separator):
                self.directory += separator

    def path_for(self, name: str, file_type: FileType) -> str:
        return f"{self.directory}{name}{file_type.extension}"

    def create(self, name: str, file_type: FileType) -> IO[str]:
        """Open a file for writing, replacing any earlier contents."""
        return open(self.path_for(name, file_type), "w", encoding="utf-8")

    def open(self, name: str, file_type: FileType) -> IO[str]:
        return open(self.path_for(name, file_type), encoding="utf-8", errors="replace")

    def list_files(self, file_type: FileType) -> list[str]:
        """Names, without extension, of the files of *file_type*, sorted."""
        extension = file_type.extension
        try:
            entries = list(os.scandir(self.directory or "."))
        except OSError:
            return []
        return sorted(
            entry.name[: -len(extension)]
            for entry in entries
            if entry.name.lower().endswith(extension) and entry.is_file()
        )

    def screen_id(self, name: str, file_type: FileType) -> int | None:
        """The screen ID on the first line of the file, or None if absent."""
        try:
            with self.open(name, file_type) as stream:
                first_line = stream.readline()
        except OSError:
            return None
        match = _SCREEN_ID.match(first_line)
        return int(match.group(1)) if match else None