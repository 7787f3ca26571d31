"""
posixfs - POSIX path algebra with explicit filesystem failures.

Path values combine and resolve POSIX paths as pure string operations;
filesystem methods go through a single OS call translator that raises
CallFailure naming the operation and its arguments.
"""
from .elements import Dir, File
from .errors import (
    CallFailure,
    FileSystemError,
    InvalidPathArgument,
    NotADirectory,
    NotAFile,
    PathError,
)
from .path import Path, UnlinkResult
from .settings import Settings, create_settings_from_env
from .temp_file import TempFile

__all__ = [
    "Path",
    "UnlinkResult",
    "Dir",
    "File",
    "TempFile",
    "Settings",
    "create_settings_from_env",
    "FileSystemError",
    "InvalidPathArgument",
    "CallFailure",
    "PathError",
    "NotAFile",
    "NotADirectory",
]
