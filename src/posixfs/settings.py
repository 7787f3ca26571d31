"""
Settings and configuration for posixfs.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables on demand.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass

__all__ = ["Settings", "create_settings_from_env", "DEFAULT_DIR_MODE", "DEFAULT_TEMP_PREFIX"]

DEFAULT_DIR_MODE = 0o777
DEFAULT_TEMP_PREFIX = "_ok_fs_"
DEFAULT_TEMP_NAME_BYTES = 32


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for posixfs.

    Attributes:
        dir_mode: Permission bits for directories created by the CLI mkdir command
        temp_prefix: File name prefix for TempFile.create()
        temp_name_bytes: Random bytes in a temp file name (rendered as hex)
    """
    dir_mode: int = DEFAULT_DIR_MODE
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    temp_name_bytes: int = DEFAULT_TEMP_NAME_BYTES

    def __post_init__(self):
        """Validate settings on construction."""
        if not 0 <= self.dir_mode <= 0o7777:
            raise ValueError(f"dir_mode must be between 0o0 and 0o7777, got {oct(self.dir_mode)}")

        # The prefix becomes part of a single file name
        if not self.temp_prefix or "/" in self.temp_prefix or "\0" in self.temp_prefix:
            raise ValueError(f"Invalid temp_prefix: {self.temp_prefix!r}")

        if self.temp_name_bytes < 8:
            raise ValueError(f"temp_name_bytes must be at least 8, got {self.temp_name_bytes}")


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - POSIXFS_DIR_MODE (octal, default: 777)
        - POSIXFS_TEMP_PREFIX (default: _ok_fs_)
        - POSIXFS_TEMP_NAME_BYTES (default: 32)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If a value is malformed or fails validation

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    dir_mode_raw = os.getenv("POSIXFS_DIR_MODE")
    if dir_mode_raw:
        if not re.fullmatch(r"(0o)?[0-7]{1,4}", dir_mode_raw):
            raise ValueError(f"POSIXFS_DIR_MODE must be an octal mode, got {dir_mode_raw!r}")
        dir_mode = int(dir_mode_raw.removeprefix("0o"), 8)
    else:
        dir_mode = DEFAULT_DIR_MODE

    name_bytes_raw = os.getenv("POSIXFS_TEMP_NAME_BYTES")
    temp_name_bytes = int(name_bytes_raw) if name_bytes_raw else DEFAULT_TEMP_NAME_BYTES

    return Settings(
        dir_mode=dir_mode,
        temp_prefix=os.getenv("POSIXFS_TEMP_PREFIX", DEFAULT_TEMP_PREFIX),
        temp_name_bytes=temp_name_bytes,
    )
