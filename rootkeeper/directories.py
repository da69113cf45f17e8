"""Directory navigation confined to a root folder."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .activity import ActivityLog


class NavigationError(Exception):
    """Raised when a move between directories is not possible."""


class InvalidNameError(ValueError):
    """Raised when a name given by the user is not acceptable."""


def contains_whitespace(text: str) -> bool:
    """Return True if ``text`` contains a space character."""
    return " " in text


class DirectoryTools:
    """Creates, removes and moves between directories under a root."""

    def __init__(
        self,
        start_path: str | os.PathLike[str] | None = None,
        log: ActivityLog | None = None,
    ) -> None:
        root = Path.cwd() / "root" if start_path is None else Path(start_path)
        self._open(root, log)
        self.log.record("entered application")

    def _open(self, root: Path, log: ActivityLog | None) -> None:
        if not root.exists():
            root.mkdir()
        self._root = root
        self._current = root
        self.log = log if log is not None else ActivityLog()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def current_directory(self) -> Path:
        return self._current

    def create_directory(self, directory_name: str) -> Path:
        """Create a directory in the current one and return its path."""
        if contains_whitespace(directory_name):
            raise InvalidNameError("Invalid directory name: contains whitespace.")
        new_dir = self._current / directory_name
        if new_dir.exists():
            raise FileExistsError(f'Directory already exists: "{new_dir}"')
        new_dir.mkdir()
        self.log.record("created a directory")
        return new_dir

    def delete_directory(self, directory_name: str) -> Path:
        """Remove a directory and everything in it."""
        target = self._current / directory_name
        if not target.is_dir():
            raise FileNotFoundError(f'Directory does not exist: "{target}"')
        shutil.rmtree(target)
        self.log.record("deleted a directory")
        return target

    def rename_directory(self, old_name: str, new_name: str) -> Path:
        """Rename an entry of the current directory and return its new path."""
        old_path = self._current / old_name
        new_path = self._current / new_name
        if not old_path.exists():
            raise FileNotFoundError("Directory does not exist.")
        old_path.rename(new_path)
        self.log.record("renamed a directory")
        return new_path

    def change_directory(self, path: str) -> Path:
        """Move into ``path``, relative to the current directory."""
        target = self._current / path
        if not target.is_dir():
            raise NavigationError("Invalid directory.")
        self._current = target
        self.log.record(f"moved into a directory: {target}")
        return target

    def list_contents(self) -> list[Path]:
        """Return the entries of the current directory, sorted by name."""
        entries = sorted(self._current.iterdir(), key=lambda p: p.name)
        for _ in entries:
            self.log.record("listed directory contents")
        return entries

    def go_back(self) -> Path:
        """Move to the parent directory, never above the root."""
        if self._current == self._root:
            raise NavigationError("Already at root directory.")
        self._current = self._current.parent
        self.log.record("moved up a directory level")
        return self._current

    def reset_to_root(self) -> Path:
        """Return to the root directory."""
        self.log.record("moved to root")
        self._current = self._root
        return self._current