"""File operations in the current directory."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable
from pathlib import Path

from .activity import ActivityLog
from .directories import DirectoryTools, InvalidNameError, contains_whitespace

ACCEPTED_EXTENSIONS = ("txt", "dat")


def _open_in_notepad(path: Path) -> None:
    subprocess.run(["notepad.exe", str(path)], check=False)


class FileTools(DirectoryTools):
    """Creates, reads, edits and deletes files under a root directory."""

    def __init__(
        self,
        root_path: str | os.PathLike[str],
        log: ActivityLog | None = None,
        editor: Callable[[Path], object] | None = None,
    ) -> None:
        self._open(Path(root_path), log)
        self.editor = editor if editor is not None else _open_in_notepad

    @staticmethod
    def _check_name(file_name: str) -> None:
        if contains_whitespace(file_name):
            raise InvalidNameError("Invalid file name: contains whitespace.")

    def create_file(self, file_name: str, file_extension: str) -> Path:
        """Create ``file_name.file_extension``; text files open in the editor."""
        self._check_name(file_name)
        if file_extension not in ACCEPTED_EXTENSIONS:
            raise InvalidNameError(f"Invalid file extension: {file_extension}")
        file = f"{file_name}.{file_extension}"
        path = self._current / file
        if path.exists():
            raise FileExistsError(f"{file} already exists.")
        path.write_text("Hello world\n")
        if file_extension == "txt":
            self.editor(path)
        return path

    def read_file(self, file_name: str) -> list[str]:
        """Return the lines of a file in the current directory."""
        self._check_name(file_name)
        path = self._current / file_name
        if not path.exists():
            raise FileNotFoundError(f"{file_name} does not exist.")
        return path.read_text().splitlines()

    def edit_file(self, file_name: str) -> Path:
        """Open an existing file in the editor."""
        self._check_name(file_name)
        path = self._current / file_name
        if not path.exists():
            raise FileNotFoundError(f"{file_name} does not exist.")
        self.editor(path)
        return path

    def delete_file(self, file_name: str, confirm: Callable[[], str]) -> bool:
        """Delete ``file_name.txt`` once ``confirm`` answers yes.

        Returns True if the file was deleted and False if the user declined.
        """
        self._check_name(file_name)
        path = self._current / f"{file_name}.txt"
        if not path.exists():
            raise FileNotFoundError(f"{file_name} does not exist.")
        answer = confirm().strip()[:1]
        if answer in ("N", "n"):
            return False
        if answer in ("Y", "y"):
            path.unlink()
            return True
        raise ValueError("Invalid input!")