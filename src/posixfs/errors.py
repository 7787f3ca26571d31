"""
Filesystem error classes.

Provides a clear taxonomy of errors raised by path combination and by the
OS call translator. Every failure names what was attempted, so callers can
diagnose a problem without additional logging.
"""
from __future__ import annotations

from typing import Any, Optional


class FileSystemError(Exception):
    """
    Base class for all posixfs errors.

    Catching this catches everything the library raises on purpose; plain
    OSError or ValueError never escapes a driver call.
    """
    pass


class InvalidPathArgument(FileSystemError, TypeError):
    """
    A path argument is not a string, Path, path-like object or sequence.

    Raised synchronously while combining, before any OS call is made.
    """

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid parameter passed. Expecting str, Path or a sequence of them, "
            f"got {type(value).__name__}"
        )
        self.value = value


class CallFailure(FileSystemError):
    """
    A native filesystem call failed.

    Attributes:
        context: What was attempted, with the literal arguments interpolated
        os_message: Error text reported by the operating system
        code: OS error number (errno), 0 when the OS supplied none
    """

    def __init__(self, context: str, os_message: str, code: Optional[int] = None):
        super().__init__(f"{context}: `{os_message}`" if context else f"`{os_message}`")
        self.context = context
        self.os_message = os_message
        self.code = code or 0


class PathError(FileSystemError):
    """
    A precondition on a specific path was violated.

    Raised before any OS call when, for example, a directory is given as the
    destination of a file copy.
    """

    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(f"With '{path}': {message}")


class NotAFile(PathError):
    """The path was expected to be a regular file."""

    def __init__(self, path: Any, message: str = ""):
        super().__init__(path, f"Is not a file! {message}".rstrip())


class NotADirectory(PathError):
    """The path was expected to be a directory."""

    def __init__(self, path: Any, message: str = ""):
        super().__init__(path, f"Is not a directory! {message}".rstrip())


__all__ = [
    "FileSystemError",
    "InvalidPathArgument",
    "CallFailure",
    "PathError",
    "NotAFile",
    "NotADirectory",
]
