"""
Directory and file wrappers.

Thin objects bound to a single Path that expose the operations that make
sense for a directory or a regular file. Both accept anything Path accepts,
including another wrapper, and expose the underlying Path through
get_path() so they can in turn be passed wherever a path is expected.
"""
from __future__ import annotations

from typing import List

from .path import Path, PathArg

__all__ = ["FSElement", "Dir", "File"]


class FSElement:
    """Base class for objects bound to one filesystem path."""

    def __init__(self, *path: PathArg) -> None:
        self._path = Path.get_path_object(path[0]) if len(path) == 1 else Path(*path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path.get()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FSElement):
            return type(self) is type(other) and self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._path))

    @property
    def path(self) -> Path:
        return self._path

    def get_path(self) -> Path:
        return self._path

    def name(self) -> str:
        return self._path.name()

    def exists(self) -> bool:
        return self._path.exists()

    def parent(self) -> Dir:
        return Dir(self._path.back())


class Dir(FSElement):
    """A directory."""

    def exists(self) -> bool:
        return self._path.is_dir()

    def create(self, recursive: bool = True) -> Dir:
        self._path.mkdir(recursive=recursive)
        return self

    def items(self, descending: bool = False) -> List[str]:
        return self._path.scandir(descending=descending)

    def dir(self, *path: PathArg) -> Dir:
        return Dir(self._path.append(*path))

    def file(self, *path: PathArg) -> File:
        return File(self._path.append(*path))

    def is_empty(self) -> bool:
        return self._path.is_empty()

    def clean(self, follow_link: bool = False) -> None:
        self._path.clean_directory(follow_link=follow_link)

    def delete(self, recursive: bool = True) -> None:
        self._path.delete(recursive=recursive)

    def copy_content(self, to: PathArg) -> Dir:
        """Mirror this directory's content into another directory and return it."""
        destination = Path.get_path_object(to)
        self._path.copy_content(destination)
        return Dir(destination)


class File(FSElement):
    """A regular file."""

    def exists(self) -> bool:
        return self._path.is_file()

    def touch(self, recursive: bool = True) -> File:
        self._path.touch(recursive=recursive)
        return self

    def size(self) -> int:
        return self._path.filesize()

    def is_empty(self) -> bool:
        return self._path.is_empty()

    def delete(self) -> None:
        self._path.unlink()

    def copy(self, to: PathArg) -> File:
        return File(self._path.copy_file(to))

    def move(self, to: PathArg) -> File:
        """Move the file; this object keeps pointing at the old location."""
        return File(self._path.move_file(to))

    def move_into(self, directory: PathArg) -> File:
        return File(self._path.move_into(directory))
