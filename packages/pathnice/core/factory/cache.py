"""Process-wide cache of path modules."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pathnice.core.factory.module import PathModule, build_path_module
from pathnice.core.io import FileSystem, default_fs

logger = logging.getLogger(__name__)

# id(lowpath) -> id(fs) -> module. Modules keep both keys alive, so ids are
# never reused while an entry exists.
_modules: dict[int, dict[int, PathModule]] = {}
_lock = threading.RLock()


def get_path_module(lowpath: Any, fs: FileSystem | None = None) -> PathModule:
    """
    Module for ``lowpath`` on ``fs`` (the default filesystem if None).

    Keys are compared by identity. The same arguments return the same module
    for the life of the process.

    Example:
        >>> get_path_module(lowpath.posix, fs) is get_path_module(lowpath.posix, fs)
        True
    """
    if fs is None:
        fs = default_fs

    with _lock:
        by_fs = _modules.get(id(lowpath))
        if by_fs is None:
            by_fs = _modules[id(lowpath)] = {}

        module = by_fs.get(id(fs))
        if module is None:
            logger.debug(f"Path module cache miss for {lowpath!r} on {type(fs).__name__}")
            module = build_path_module(lowpath, fs)
            by_fs[id(fs)] = module
        return module


def cache_info() -> int:
    """Number of cached modules."""
    with _lock:
        return sum(len(by_fs) for by_fs in _modules.values())
