"""
Immutable POSIX path values.

A Path wraps a single normalized path string. Combination, resolution and
decomposition are pure string algebra; every method that touches the
filesystem delegates to posixfs.driver and reports failures as CallFailure.

Root rules follow POSIX: one leading slash or three and more mean the root
'/', exactly two leading slashes are kept as the distinct root '//'.
"""
from __future__ import annotations

import errno
import logging
import os
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, List, Sequence, Union

from . import driver
from .errors import CallFailure, NotADirectory, NotAFile, PathError
from .fragments import Fragment, Group, Ref, Text, to_fragments
from .settings import DEFAULT_DIR_MODE

if TYPE_CHECKING:
    from .elements import Dir, File

__all__ = ["Path", "PathArg", "UnlinkResult", "SEPARATOR"]

logger = logging.getLogger(__name__)

SEPARATOR = "/"
_ROOTS = ("/", "//")

PathArg = Union[str, "Path", "os.PathLike[str]", Sequence[Any]]


class UnlinkResult(str, Enum):
    """Outcome of a best-effort unlink."""
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FAILED = "failed"


def _root_of(source: str) -> str:
    if source in ("",) + _ROOTS:
        return source

    leading = len(source) - len(source.lstrip(SEPARATOR))
    if leading == 0:
        return ""
    # Only exactly two leading slashes form the '//' root
    return "//" if leading == 2 else SEPARATOR


def _segments(source: str) -> List[str]:
    return [part for part in source.split(SEPARATOR) if part]


def _render(fragment: Fragment, keep_root: bool) -> str:
    if isinstance(fragment, Group):
        return _join(fragment.items, keep_root)

    root = _root_of(fragment.text) if keep_root else ""
    return root + SEPARATOR.join(_segments(fragment.text))


def _join(fragments: Iterable[Fragment], keep_root: bool) -> str:
    result = ""

    for fragment in fragments:
        part = _render(fragment, keep_root)
        keep_root = False

        if result and part and part[0] != SEPARATOR and result not in _ROOTS:
            part = SEPARATOR + part

        result += part

    return result


def _push_segment(result: List[str], part: str, root: str) -> None:
    if part == ".":
        return
    if part == "..":
        if result and result[-1] != "..":
            result.pop()
        elif not root:
            result.append(part)
        return
    result.append(part)


class Path:
    """
    Immutable POSIX path.

    Constructed from any number of path arguments: strings, other Path
    objects, os.PathLike values, objects exposing get_path(), or nested
    lists/tuples of those. The arguments are combined with Path.combine().

    Examples:
        >>> Path("/usr//", "local", ["bin", "python"])
        Path('/usr/local/bin/python')

        >>> Path("src/../lib/./app").resolve()
        Path('lib/app')
    """

    __slots__ = ("_path",)

    def __init__(self, *parts: PathArg) -> None:
        object.__setattr__(self, "_path", _join(to_fragments(parts), True))

    @classmethod
    def _skip_check(cls, path: str) -> Path:
        """Wrap a string that is already normalized."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_path", path)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Path objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Path objects are immutable")

    def __reduce__(self):
        return (Path, (self._path,))

    def __copy__(self) -> Path:
        return self

    def __deepcopy__(self, memo) -> Path:
        return self

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def __len__(self) -> int:
        return len(self._path)

    def __truediv__(self, other: PathArg) -> Path:
        return self.append(other)

    def __rtruediv__(self, other: PathArg) -> Path:
        return self.prepend(other)

    # Pure path algebra

    def get(self) -> str:
        return self._path

    def append(self, *parts: PathArg) -> Path:
        """Return a new path with parts appended; root comes from self."""
        return Path._skip_check(_join((Ref(self._path), Group(to_fragments(parts))), True))

    def prepend(self, *parts: PathArg) -> Path:
        """Return a new path with parts in front; root comes from the first part."""
        return Path._skip_check(_join((Group(to_fragments(parts)), Ref(self._path)), True))

    def back(self) -> Path:
        """
        Return the parent path.

        Works on the literal last separator: 'a/b' -> 'a', '/a' -> '/',
        '//a' -> '//', 'a' -> ''. A trailing separator is not stripped, so
        'a/b/' -> 'a/b'.
        """
        pos = self._path.rfind(SEPARATOR)

        if pos == -1:
            return Path()
        elif pos == 0:
            return Path._skip_check(SEPARATOR)
        elif pos == 1 and self._path[0] == SEPARATOR:
            return Path._skip_check("//")

        return Path._skip_check(self._path[:pos])

    def resolve(self) -> Path:
        """
        Return the path with dot segments and a leading '~' resolved.

        - '.' segments are dropped
        - '..' cancels the preceding segment; under a root, excess '..' are
          dropped, in a relative path they accumulate at the front
        - '~' becoming the first segment of a relative result is replaced by
          the home directory (including its root); elsewhere it is literal

        Resolution never touches the filesystem and is idempotent.

        Examples:
            >>> Path("a/./b/../c").resolve()
            Path('a/c')

            >>> Path("/../../etc").resolve()
            Path('/etc')

            >>> Path("../../x").resolve()
            Path('../../x')
        """
        root = _root_of(self._path)
        result: List[str] = []

        for part in _segments(self._path):
            if part == "~" and not result and not root:
                home = Path.home()
                root = _root_of(home)
                for home_part in _segments(home):
                    _push_segment(result, home_part, root)
                continue

            _push_segment(result, part, root)

        return Path._skip_check(root + SEPARATOR.join(result))

    def root(self) -> str:
        """Root form of the path: '', '/' or '//'."""
        return _root_of(self._path)

    def is_root(self) -> bool:
        return self._path in _ROOTS

    def is_relative(self) -> bool:
        return not self._path or self._path[0] != SEPARATOR

    def is_absolute(self) -> bool:
        return not self.is_relative()

    def name(self) -> str:
        """Final segment of the path; a bare root is its own name."""
        if self.is_root():
            return self._path

        segments = _segments(self._path)
        return segments[-1] if segments else ""

    def length(self) -> int:
        return len(self._path)

    def depth(self) -> int:
        """Number of separators between non-empty segments."""
        segments = _segments(self._path)
        return len(segments) - 1 if segments else 0

    # Filesystem queries

    def exists(self) -> bool:
        return driver.file_exists(self._path)

    def is_file(self) -> bool:
        return driver.is_file(self._path)

    def is_dir(self) -> bool:
        return driver.is_dir(self._path)

    def is_link(self) -> bool:
        return driver.is_link(self._path)

    def is_readable(self) -> bool:
        return driver.is_readable(self._path)

    def is_writable(self) -> bool:
        return driver.is_writable(self._path)

    def is_executable(self) -> bool:
        return driver.is_executable(self._path)

    def filesize(self) -> int:
        return driver.filesize(self._path)

    def is_empty(self) -> bool:
        """
        Check whether a directory has no entries or a file has no bytes.

        Raises:
            PathError: If the path is neither a directory nor a file
        """
        if self.is_dir():
            return not self.scandir()
        if self.is_file():
            return self.filesize() == 0

        raise PathError(self, "Is neither a file nor a directory")

    def scandir(self, exclude_special: bool = True, descending: bool = False) -> List[str]:
        """
        List directory entries sorted by name.

        Args:
            exclude_special: Leave out '.' and '..'
            descending: Sort in reverse order

        Raises:
            CallFailure: If the directory can not be read
        """
        names = driver.scandir(self._path, descending)
        if exclude_special:
            return names

        return sorted([".", ".."] + names, reverse=descending)

    # Filesystem mutation

    def chmod(self, mode: int) -> None:
        driver.chmod(self._path, mode)

    def mkdir(self, recursive: bool = True, mode: int = DEFAULT_DIR_MODE) -> None:
        """Create the directory; does nothing if it already exists."""
        if self.is_dir():
            return

        driver.mkdir(self._path, mode, recursive)

    def touch(self, recursive: bool = True) -> None:
        """
        Create the file or update its access and modification times.

        Args:
            recursive: Create missing parent directories

        Raises:
            NotADirectory: If the parent is missing and recursive is False
            CallFailure: If the OS refuses to create the file
        """
        parent = self.back()

        if parent and not parent.is_dir():
            if not recursive:
                raise NotADirectory(parent, f"Can not create '{self._path}' inside it")
            parent.mkdir(recursive=True)

        driver.touch(self._path)

    def unlink(self) -> None:
        driver.unlink(self._path)

    def try_unlink(self) -> UnlinkResult:
        """
        Unlink the path without raising.

        Only OS call failures are suppressed; a missing path is reported as
        NOT_FOUND, any other failure is logged and reported as FAILED.
        """
        try:
            driver.unlink(self._path)
        except CallFailure as failure:
            if failure.code == errno.ENOENT:
                return UnlinkResult.NOT_FOUND
            logger.warning(f"Best-effort unlink failed: {failure}")
            return UnlinkResult.FAILED

        return UnlinkResult.REMOVED

    def rmdir(self) -> None:
        driver.rmdir(self._path)

    def delete(self, recursive: bool = True) -> None:
        """
        Delete whatever is at this path.

        Symbolic links are unlinked without touching their target. A
        directory is emptied first when recursive is True, then removed. A
        missing path is ignored.
        """
        if self.is_link():
            self.unlink()
        elif self.is_dir():
            if recursive:
                self.clean_directory()
            self.rmdir()
        elif self.is_file():
            self.unlink()

    def clean_directory(self, follow_link: bool = False) -> None:
        """
        Remove every entry of the directory, keeping the directory itself.

        Symbolic links are unlinked. With follow_link, a link pointing to a
        directory has that directory's contents cleaned before the link is
        unlinked. Does nothing if the path is not a directory.
        """
        if not self.is_dir():
            return

        logger.debug(f"Cleaning directory {self._path} (follow_link={follow_link})")

        for name in self.scandir():
            child = self.append(name)

            if child.is_link():
                if follow_link and child.is_dir():
                    child.clean_directory(follow_link=True)
                child.unlink()
            elif child.is_dir():
                child.clean_directory(follow_link=follow_link)
                child.rmdir()
            else:
                child.delete()

    def copy_file(self, to: PathArg) -> Path:
        """
        Copy this file's content to another path.

        Missing parent directories of the destination are created.

        Args:
            to: Destination file path

        Returns:
            The destination path

        Raises:
            NotAFile: If this path is not a file
            PathError: If the destination is an existing directory
            CallFailure: If the copy itself fails
        """
        destination = Path.get_path_object(to)
        self._require_file_transfer(destination, "copy")

        driver.copy(self._path, destination.get())
        return destination

    def move_file(self, to: PathArg) -> Path:
        """Move this file to another path; same preconditions as copy_file()."""
        destination = Path.get_path_object(to)
        self._require_file_transfer(destination, "move")

        driver.rename(self._path, destination.get())
        return destination

    def move_into(self, directory: PathArg) -> Path:
        """
        Move this file or directory into a directory, keeping its name.

        The directory is created when missing.

        Returns:
            The new location

        Raises:
            NotADirectory: If directory exists and is not a directory
        """
        target_dir = Path.get_path_object(directory)

        if target_dir.exists():
            if not target_dir.is_dir():
                raise NotADirectory(target_dir, f"Can not move '{self._path}' into it")
        else:
            target_dir.mkdir(recursive=True)

        destination = target_dir.append(self.name())
        driver.rename(self._path, destination.get())
        return destination

    def copy_content(self, to: PathArg) -> None:
        """
        Recursively copy the contents of this directory into another one.

        The destination is created when missing. Symbolic links are skipped.

        Raises:
            NotADirectory: If this path or an existing destination is not a
                directory
            PathError: If the destination is this directory or lies below it
        """
        if not self.is_dir():
            raise NotADirectory(self, "Only a directory's content can be copied")

        destination = Path.get_path_object(to)

        # Real paths, so a link or relative form still counts as overlap
        source_real = os.path.realpath(self._path)
        destination_real = os.path.realpath(destination.get())
        inside = destination_real.startswith(source_real.rstrip(SEPARATOR) + SEPARATOR)
        if destination_real == source_real or inside:
            raise PathError(destination, "Can not copy a directory into itself")

        if destination.exists():
            if not destination.is_dir():
                raise NotADirectory(destination, "Destination for directory content must be a directory")
        else:
            destination.mkdir(recursive=True)

        logger.debug(f"Copying content of {self._path} into {destination}")

        for name in self.scandir():
            source = self.append(name)
            target = destination.append(name)

            if source.is_link():
                continue
            if source.is_dir():
                source.copy_content(target)
            elif source.is_file():
                source.copy_file(target)

    def create_dir(self, recursive: bool = True) -> Dir:
        from .elements import Dir

        self.mkdir(recursive=recursive)
        return Dir(self)

    def create_file(self, recursive: bool = True) -> File:
        from .elements import File

        self.touch(recursive=recursive)
        return File(self)

    def _require_file_transfer(self, destination: Path, verb: str) -> None:
        if not self.is_file():
            raise NotAFile(self, f"Only files can be used with {verb}_file")
        if destination.is_dir():
            raise PathError(destination, f"Can not {verb} a file in place of a directory")

        parent = destination.back()
        if parent:
            parent.mkdir(recursive=True)

    # Constructors and helpers

    @staticmethod
    def combine(*parts: PathArg) -> str:
        """
        Combine path arguments into a normalized path string.

        Duplicate separators are collapsed. Only the very first argument may
        contribute a root; a leading separator on later arguments is ignored.

        Examples:
            >>> Path.combine("/", "a")
            '/a'

            >>> Path.combine("a/", "/b")
            'a/b'

            >>> Path.combine("//abc////", "de//f")
            '//abc/de/f'

        Raises:
            InvalidPathArgument: If an argument has an unsupported type
        """
        return _join(to_fragments(parts), True)

    @staticmethod
    def combine_to_path(*parts: PathArg) -> Path:
        return Path._skip_check(Path.combine(*parts))

    @staticmethod
    def get_path_object(value: Any) -> Path:
        """
        Normalize any accepted path-like value into a Path.

        A Path is returned as is, a one-item sequence holding a Path yields
        that Path, and anything else is combined.
        """
        if isinstance(value, Path):
            return value
        if isinstance(value, (list, tuple)) and len(value) == 1 and isinstance(value[0], Path):
            return value[0]

        return Path.combine_to_path(value)

    @staticmethod
    def realpath(*parts: PathArg) -> str:
        return Path.combine_to_path(*parts).resolve().get()

    @staticmethod
    def home() -> str:
        """Home directory from $HOME, falling back to the account database."""
        return os.environ.get("HOME") or os.path.expanduser("~")

    @staticmethod
    def root_path() -> Path:
        return Path._skip_check(SEPARATOR)

    @staticmethod
    def home_path() -> Path:
        return Path(Path.home())
