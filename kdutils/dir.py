"""A directory path with existence checks, creation and removal."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Union

PathInput = Union[str, "os.PathLike[str]"]

_SEPARATORS = os.sep + (os.altsep or "")


def _generic(path: str) -> str:
    """Return ``path`` with native separators replaced by forward slashes."""
    if os.altsep:
        return path.replace(os.sep, "/")
    return path


class Dir:
    """A directory, named by its path; a trailing separator is dropped."""

    __slots__ = ("_path",)

    def __init__(self, path: PathInput = "") -> None:
        raw = os.fspath(path)
        drive, rest = os.path.splitdrive(raw)
        stripped = rest.rstrip(_SEPARATORS)
        if rest and not stripped:
            # The path is a root: keep the root separator.
            stripped = rest[0]
        self._path = drive + stripped

    def exists(self) -> bool:
        """Return True if the path names an existing directory."""
        return bool(self._path) and os.path.isdir(self._path)

    def mkdir(self) -> bool:
        """Create the directory; return False if it exists or cannot be made."""
        if not self._path:
            return False
        try:
            os.mkdir(self._path)
        except OSError:
            return False
        return True

    def rmdir(self) -> bool:
        """Remove the directory and everything in it; return True if anything was removed."""
        if not self._path or not os.path.lexists(self._path):
            return False
        try:
            if os.path.isdir(self._path) and not os.path.islink(self._path):
                shutil.rmtree(self._path)
            else:
                os.remove(self._path)
        except OSError:
            return False
        return True

    def path(self) -> str:
        """Return the path with forward slashes."""
        return _generic(self._path)

    def dir_name(self) -> str:
        """Return the last component of the path."""
        return _generic(os.path.basename(self._path))

    def absolute_file_path(self, file: PathInput) -> str:
        """Return the absolute path of ``file`` inside this directory."""
        joined = os.path.join(self._path, os.fspath(file)) if self._path else os.fspath(file)
        if not os.path.isabs(joined):
            joined = os.path.join(os.getcwd(), joined)
        return _generic(joined)

    @staticmethod
    def application_dir() -> Dir:
        """Return the directory holding the running interpreter's executable."""
        executable = sys.executable
        if not executable:
            return Dir()
        return Dir(os.path.dirname(os.path.realpath(executable)))

    @staticmethod
    def from_native_separators(path: PathInput) -> str:
        """Return ``path`` with native separators replaced by forward slashes."""
        return _generic(os.fspath(path))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dir):
            return NotImplemented
        return self.path() == other.path()

    def __hash__(self) -> int:
        return hash(self.path())

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Dir({self.path()!r})"