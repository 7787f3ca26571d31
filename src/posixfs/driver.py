"""
OS call translator.

Every native filesystem primitive used by posixfs goes through execute(),
which invokes exactly one call and turns a failure reported by the OS into a
CallFailure naming the operation and its literal arguments.

Thread safety:
    Python primitives report failure by raising OSError in the calling frame,
    so the error state is scoped to the call itself rather than to a shared
    process-wide slot. Concurrent calls from different threads therefore can
    never observe each other's failures and no lock is required.

Existence probes (is_dir, is_file, ...) answer False for a path that is
missing or that has a non-directory component, and raise CallFailure for
every other error (permission denied, symlink loops, names too long)
instead of silently reporting False.
"""
from __future__ import annotations

import logging
import os
import shutil
import stat
from typing import Any, Callable, List, Optional, TypeVar

from .errors import CallFailure

__all__ = [
    "execute",
    "file_exists",
    "is_dir",
    "is_file",
    "is_link",
    "is_readable",
    "is_writable",
    "is_executable",
    "mkdir",
    "rmdir",
    "unlink",
    "scandir",
    "touch",
    "copy",
    "rename",
    "filesize",
    "chmod",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def execute(context: str, func: Callable[..., T], *args: Any) -> T:
    """
    Invoke a single filesystem primitive and translate its failure.

    Args:
        context: Message naming the operation and its literal arguments
        func: Primitive to call
        *args: Arguments passed to the primitive unchanged

    Returns:
        Whatever the primitive returned

    Raises:
        CallFailure: If the primitive raised OSError or ValueError; the
            original error is chained as __cause__
    """
    try:
        return func(*args)
    except OSError as e:
        failure = CallFailure(context, e.strerror or str(e), e.errno)
        logger.debug(f"{failure} (errno={failure.code})")
        raise failure from e
    except ValueError as e:
        # Rejected before reaching the OS, e.g. an embedded NUL byte
        failure = CallFailure(context, str(e))
        logger.debug(f"{failure} (errno={failure.code})")
        raise failure from e


def _execute_on_path(name: str, func: Callable[[str], T], path: str) -> T:
    return execute(f"Failed to execute {name}('{path}')", func, path)


def _mode_of(path: str, follow_symlinks: bool = True) -> Optional[int]:
    try:
        return os.stat(path, follow_symlinks=follow_symlinks).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None


def _exists(path: str) -> bool:
    return _mode_of(path) is not None


def _is_dir(path: str) -> bool:
    mode = _mode_of(path)
    return mode is not None and stat.S_ISDIR(mode)


def _is_file(path: str) -> bool:
    mode = _mode_of(path)
    return mode is not None and stat.S_ISREG(mode)


def _is_link(path: str) -> bool:
    mode = _mode_of(path, follow_symlinks=False)
    return mode is not None and stat.S_ISLNK(mode)


def _touch(path: str) -> None:
    with open(path, "a"):
        pass
    os.utime(path, None)


def _mkdir(path: str, mode: int, recursive: bool) -> None:
    if recursive:
        os.makedirs(path, mode)
    else:
        os.mkdir(path, mode)


def _scandir(path: str, descending: bool) -> List[str]:
    return sorted(os.listdir(path), reverse=descending)


def file_exists(path: str) -> bool:
    return _execute_on_path("file_exists", _exists, path)


def is_dir(path: str) -> bool:
    return _execute_on_path("is_dir", _is_dir, path)


def is_file(path: str) -> bool:
    return _execute_on_path("is_file", _is_file, path)


def is_link(path: str) -> bool:
    return _execute_on_path("is_link", _is_link, path)


def is_readable(path: str) -> bool:
    return execute(f"Failed to execute is_readable('{path}')", os.access, path, os.R_OK)


def is_writable(path: str) -> bool:
    return execute(f"Failed to execute is_writable('{path}')", os.access, path, os.W_OK)


def is_executable(path: str) -> bool:
    return execute(f"Failed to execute is_executable('{path}')", os.access, path, os.X_OK)


def rmdir(path: str) -> None:
    _execute_on_path("rmdir", os.rmdir, path)


def unlink(path: str) -> None:
    _execute_on_path("unlink", os.unlink, path)


def touch(path: str) -> None:
    _execute_on_path("touch", _touch, path)


def filesize(path: str) -> int:
    return _execute_on_path("filesize", os.path.getsize, path)


def mkdir(path: str, mode: int = 0o777, recursive: bool = False) -> None:
    execute(f"Failed to mkdir('{path}')", _mkdir, path, mode, recursive)


def scandir(path: str, descending: bool = False) -> List[str]:
    """
    List the entries of a directory, sorted by name.

    The special entries '.' and '..' are never included.
    """
    return execute(f"Failed to scandir('{path}')", _scandir, path, descending)


def copy(source: str, destination: str) -> None:
    execute(f"Failed to copy('{source}', '{destination}')", shutil.copyfile, source, destination)


def rename(source: str, destination: str) -> None:
    execute(f"Failed to rename('{source}', '{destination}')", os.rename, source, destination)


def chmod(path: str, mode: int) -> None:
    execute(f"Failed to chmod('{path}', {oct(mode)})", os.chmod, path, mode)
