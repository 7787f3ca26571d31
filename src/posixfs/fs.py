"""
Shorthand filesystem functions.

Each function combines its path arguments into a Path and delegates to the
matching Path method, so one-off operations read as a single call:

    >>> from posixfs import fs
    >>> fs.create("/tmp/project", folders=["src", "docs"], files=["README"])
    >>> fs.clean_directory("/tmp/project")
"""
from __future__ import annotations

from typing import Iterable, List

from .elements import Dir, File
from .path import Path, PathArg

__all__ = [
    "create", "path", "dir", "file",
    "exists", "is_file", "is_dir", "is_link",
    "resolve", "resolve_to_path", "combine", "combine_to_path", "realpath",
    "delete", "unlink", "rmdir", "mkdir", "touch", "touch_all", "filesize",
    "home", "root_path", "home_path",
    "clean_directory", "scandir", "copy_file", "copy_content",
]


def create(root: PathArg, folders: Iterable[PathArg] = (), files: Iterable[PathArg] = ()) -> None:
    """
    Create a directory tree below root.

    Folders are created (with missing parents) before files are touched.
    Entries that already exist are left alone. With neither folders nor
    files, root itself is created.

    Args:
        root: Base directory
        folders: Directories relative to root
        files: Files relative to root
    """
    base = Path.get_path_object(root)
    folders = list(folders)
    files = list(files)

    if not folders and not files:
        folders = [""]

    for folder in folders:
        target = base.append(folder)
        if not target.exists():
            target.mkdir(recursive=True)

    for name in files:
        target = base.append(name)
        if not target.exists():
            target.touch(recursive=True)


def path(*parts: PathArg) -> Path:
    return Path.combine_to_path(*parts)


def dir(*parts: PathArg) -> Dir:
    return Dir(*parts)


def file(*parts: PathArg) -> File:
    return File(*parts)


def exists(*parts: PathArg) -> bool:
    return path(*parts).exists()


def is_file(*parts: PathArg) -> bool:
    return path(*parts).is_file()


def is_dir(*parts: PathArg) -> bool:
    return path(*parts).is_dir()


def is_link(*parts: PathArg) -> bool:
    return path(*parts).is_link()


def resolve(*parts: PathArg) -> str:
    return resolve_to_path(*parts).get()


def resolve_to_path(*parts: PathArg) -> Path:
    return path(*parts).resolve()


def combine(*parts: PathArg) -> str:
    return Path.combine(*parts)


def combine_to_path(*parts: PathArg) -> Path:
    return Path.combine_to_path(*parts)


def realpath(*parts: PathArg) -> str:
    return Path.realpath(*parts)


def delete(*parts: PathArg) -> None:
    path(*parts).delete()


def unlink(*parts: PathArg) -> None:
    path(*parts).unlink()


def rmdir(*parts: PathArg) -> None:
    path(*parts).rmdir()


def mkdir(target: PathArg, recursive: bool = True) -> None:
    Path.get_path_object(target).mkdir(recursive=recursive)


def touch(target: PathArg, recursive: bool = True) -> None:
    Path.get_path_object(target).touch(recursive=recursive)


def touch_all(targets: Iterable[PathArg], recursive: bool = True) -> None:
    for target in targets:
        touch(target, recursive=recursive)


def filesize(*parts: PathArg) -> int:
    return path(*parts).filesize()


def home() -> str:
    return Path.home()


def root_path() -> Path:
    return Path.root_path()


def home_path() -> Path:
    return Path.home_path()


def clean_directory(*parts: PathArg, follow_link: bool = False) -> None:
    Path.get_path_object(list(parts)).clean_directory(follow_link=follow_link)


def scandir(target: PathArg, exclude_special: bool = True, descending: bool = False) -> List[str]:
    return Path.get_path_object(target).scandir(exclude_special=exclude_special, descending=descending)


def copy_file(source: PathArg, to: PathArg) -> Path:
    return Path.get_path_object(source).copy_file(to)


def copy_content(source: PathArg, to: PathArg) -> None:
    Path.get_path_object(source).copy_content(to)
