"""A file on disk that can be opened, read whole, written and removed."""

from __future__ import annotations

import errno
import io
import logging
import os
import stat
from typing import BinaryIO, Optional, Union

from kdutils.byte_array import ByteArray

_logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]"]


class File:
    """A regular file, opened in binary mode on demand."""

    __slots__ = ("_path", "_stream")

    def __init__(self, path: PathInput) -> None:
        self._path = os.fspath(path)
        self._stream: Optional[BinaryIO] = None

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return File.path_exists(self._path)

    @staticmethod
    def path_exists(path: PathInput) -> bool:
        """Return True if ``path`` names an existing regular file."""
        return os.path.isfile(path)

    def open(self, mode: str = "rb") -> bool:
        """Open the file with a built-in ``open`` mode, always binary.

        An already open stream is closed first. Returns False if the file
        cannot be opened.
        """
        if self.is_open():
            self.close()
        if "b" not in mode:
            mode += "b"
        try:
            self._stream = io.open(self._path, mode)
        except OSError:
            self._stream = None
            return False
        return True

    def is_open(self) -> bool:
        return self._stream is not None and not self._stream.closed

    def flush(self) -> None:
        if self.is_open():
            self._stream.flush()

    def close(self) -> None:
        if self._stream is None:
            return
        try:
            self.flush()
        finally:
            self._stream.close()
            self._stream = None

    def remove(self) -> bool:
        """Delete the file; return True if it existed and was removed."""
        if not self.exists():
            return False
        try:
            os.remove(self._path)
        except OSError:
            return False
        return True

    def read_all(self) -> ByteArray:
        """Return the whole content of the open file, or an empty buffer if closed."""
        if not self.is_open():
            return ByteArray()
        try:
            size = self.size()
        except OSError:
            return ByteArray()
        if size == 0:
            return ByteArray()
        try:
            self._stream.seek(0)
            data = self._stream.read(size)
        except (OSError, ValueError):
            data = b""
        result = ByteArray(data)
        result.resize(size)
        return result

    def write(self, data: Union[ByteArray, bytes, bytearray, memoryview]) -> None:
        """Write ``data`` to the open file; nothing happens if it is closed."""
        if not self.is_open():
            return
        try:
            self._stream.write(bytes(data))
        except io.UnsupportedOperation:
            _logger.warning("File %s is not open for writing", self._path)

    def file_name(self) -> str:
        return os.path.basename(self._path)

    def size(self) -> int:
        return File.path_size(self._path)

    @staticmethod
    def path_size(path: PathInput) -> int:
        """Return the size in bytes of the regular file at ``path``."""
        info = os.stat(path)
        if stat.S_ISDIR(info.st_mode):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(path))
        if not stat.S_ISREG(info.st_mode):
            raise OSError(errno.EINVAL, "Not a regular file", os.fspath(path))
        return info.st_size

    def __enter__(self) -> File:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_open():
            self.close()

    def __repr__(self) -> str:
        return f"File({self._path!r})"