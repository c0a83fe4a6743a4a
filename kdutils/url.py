"""Splitting of URLs and file paths into scheme, path and file name."""

from __future__ import annotations

import re

from kdutils.dir import Dir

_URL_PATTERN = re.compile(r"(?:([^/]{2,})?:(?://)?)?(.*/)*(.+\..+)?")


class Url:
    """A URL split into its scheme, directory path and file name."""

    __slots__ = ("_url", "_scheme", "_path", "_file_name")

    def __init__(self, url: str = "") -> None:
        self._url = url
        match = _URL_PATTERN.fullmatch(url)
        if match:
            self._scheme, self._path, self._file_name = (group or "" for group in match.groups())
        else:
            self._scheme = self._path = self._file_name = ""

    @property
    def url(self) -> str:
        return self._url

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def path(self) -> str:
        """The directory part, ending with a slash."""
        return self._path

    @property
    def file_name(self) -> str:
        return self._file_name

    def is_local_file(self) -> bool:
        return self._scheme.startswith("file")

    def to_local_file(self) -> str:
        """Return the local file path, or an empty string for a non-file URL."""
        if not self.is_local_file():
            return ""
        return self._path + self._file_name

    def is_empty(self) -> bool:
        return not self._url

    @staticmethod
    def from_local_file(path: str) -> Url:
        """Build a ``file:`` URL from a local path; a URL with a scheme is kept."""
        path = Dir.from_native_separators(path)
        url = Url(path)
        if url.scheme:
            return url
        if not url.path:
            return Url("file:" + path)
        if len(path) > 1 and path[1] == ":" and path[0] != "/":
            path = "/" + path
        return Url("file://" + path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"Url({self._url!r})"