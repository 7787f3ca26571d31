"""
Temporary file lifecycle.

A TempFile owns one path and removes the file when closed, unless it was
already deleted. Use it as a context manager:

    >>> with TempFile.create("/tmp", touch=True) as temp:
    ...     temp.path().filesize()
    0
"""
from __future__ import annotations

import logging
import secrets
from typing import Optional

from .errors import PathError
from .path import Path, PathArg, UnlinkResult
from .settings import Settings, create_settings_from_env

__all__ = ["TempFile"]

logger = logging.getLogger(__name__)


class TempFile:
    """
    A file that is removed when the TempFile is closed.

    Raises:
        PathError: If the path exists and is not a regular file
    """

    def __init__(self, path: Path) -> None:
        self._path = path

        if path.exists():
            if not path.is_file():
                raise PathError(path, "Can not create a temporary file in place of a directory")
            self._unlinked = False
        else:
            self._unlinked = True

    @classmethod
    def create(
        cls,
        directory: PathArg,
        touch: bool = False,
        settings: Optional[Settings] = None,
    ) -> TempFile:
        """
        Pick a random, unused-looking name inside a directory.

        Args:
            directory: Directory to place the file in
            touch: Create the file immediately
            settings: Naming settings (loaded from environment if None)

        Returns:
            TempFile for '<directory>/<prefix><random hex>.tmp'
        """
        if settings is None:
            settings = create_settings_from_env()

        name = f"{settings.temp_prefix}{secrets.token_hex(settings.temp_name_bytes)}.tmp"
        temp = cls(Path.get_path_object(directory).append(name))

        if touch:
            temp.touch()
        return temp

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TempFile({self._path.get()!r})"

    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def touch(self) -> None:
        self._unlinked = False
        self._path.touch(recursive=True)

    def delete(self) -> None:
        """Remove the file; raises CallFailure if that fails."""
        if not self._unlinked:
            self._unlinked = True
            self._path.unlink()

    def close(self) -> UnlinkResult:
        """
        Remove the file if it is still owned, never raising.

        Returns:
            NOT_FOUND when there was nothing left to remove
        """
        if self._unlinked:
            return UnlinkResult.NOT_FOUND

        self._unlinked = True
        result = self._path.try_unlink()
        logger.debug(f"Closed temporary file {self._path}: {result.value}")
        return result
