"""Memory mapping of a file, read-only or writable."""

from __future__ import annotations

import io
import logging
import mmap
import os
from typing import Optional

from kdutils.file import File

_logger = logging.getLogger(__name__)


class FileMapper:
    """Maps a region of a file into memory and hands it out as a memoryview."""

    __slots__ = ("_path", "_mmap", "_base", "_view", "_writable")

    def __init__(self, file: File) -> None:
        self._path = file.path
        if file.is_open():
            file.close()
        self._mmap: Optional[mmap.mmap] = None
        self._base: Optional[memoryview] = None
        self._view: Optional[memoryview] = None
        # Mode of the current map; None until map() is first called.
        self._writable: Optional[bool] = None

    @property
    def path(self) -> str:
        return self._path

    def map(self, offset: int = 0, length: int = 0, writable: bool = False) -> memoryview:
        """Map ``length`` bytes from ``offset``; a length of 0 maps to the end.

        If a mapping of the same mode already exists it is returned unchanged.
        A mapping of the other mode is released first. Raises ValueError for a
        range outside the file and OSError when the file cannot be mapped.
        """
        if self._writable == writable and self._view is not None:
            _logger.warning("Requested map data from a FileMapper which was already mapped.")
            return self._view
        self._release()
        self._writable = writable
        self._view = self._map_file(offset, length, writable)
        return self._view

    def _map_file(self, offset: int, length: int, writable: bool) -> memoryview:
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        access = mmap.ACCESS_WRITE if writable else mmap.ACCESS_READ
        with io.open(self._path, "r+b" if writable else "rb") as handle:
            file_size = os.fstat(handle.fileno()).st_size
            if length == 0:
                length = file_size - offset
            if length <= 0 or offset + length > file_size:
                raise ValueError("Mapping range lies outside the file")
            delta = offset % mmap.ALLOCATIONGRANULARITY
            mapped = mmap.mmap(handle.fileno(), length + delta, access=access, offset=offset - delta)
        base = memoryview(mapped)
        self._mmap = mapped
        self._base = base
        return base[delta : delta + length]

    def _release(self) -> None:
        mapped, base, view = self._mmap, self._base, self._view
        self._mmap = self._base = self._view = None
        if mapped is None:
            return
        try:
            if self._writable:
                mapped.flush()
        finally:
            if view is not None:
                view.release()
            base.release()
            mapped.close()

    def unmap(self, mapping: Optional[memoryview] = None) -> bool:
        """Release the current mapping, flushing it if writable.

        Returns False if nothing is mapped. ``mapping`` may be the view from
        :meth:`map`; a different view only draws a warning.
        """
        if self._writable is None:
            _logger.warning("Requested an unmap of a FileMapper which was never mapped.")
            return False
        if self._view is None:
            _logger.warning("Requested an unmap of a FileMapper which is not mapped.")
            return False
        if mapping is not None and mapping is not self._view:
            _logger.warning("View passed to FileMapper.unmap does not match the existing mapping.")
        self._release()
        return True

    def size(self) -> int:
        """Return the size of the mapping, which may differ from the file's."""
        if self._writable is None:
            _logger.warning("Queried the size of a FileMapper which was never mapped.")
            return 0
        return len(self._view) if self._view is not None else 0

    def close(self) -> None:
        """Release any mapping and forget its mode."""
        self._release()
        self._writable = None

    def __enter__(self) -> FileMapper:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileMapper({self._path!r})"