"""Composed filesystem helpers.

Each helper is a coroutine taking the filesystem (and, where it derives
paths, the path implementation) explicitly:

    >>> await ensure_file(lowpath.posix, fs, "/data/app/settings.json")
    >>> await empty_dir(lowpath.posix, fs, "/data/cache")
    >>> await remove(fs, "/data/app")
"""

from pathnice.core.fs.copy import copy
from pathnice.core.fs.empty_dir import empty_dir
from pathnice.core.fs.ensure import ensure_dir, ensure_file
from pathnice.core.fs.models import (
    CopyOptions,
    EnsureDirOptions,
    EnsureFileOptions,
    JsonWriteOptions,
    MoveOptions,
    WriteFileOptions,
)
from pathnice.core.fs.move import move
from pathnice.core.fs.remove import remove

__all__ = [
    # Helpers
    "ensure_dir",
    "ensure_file",
    "remove",
    "empty_dir",
    "copy",
    "move",
    # Options
    "EnsureDirOptions",
    "EnsureFileOptions",
    "WriteFileOptions",
    "JsonWriteOptions",
    "CopyOptions",
    "MoveOptions",
]
