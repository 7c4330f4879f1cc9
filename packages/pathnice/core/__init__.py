"""path-nice: chainable path values over a platform path API and an async filesystem.

Example:
    >>> from pathnice.core import path
    >>> config = path("/srv/app").join("config.json")
    >>> await config.output_json({"debug": True})
    >>> path.posix.join("a", "b")  # drop-in for posixpath
    'a/b'
"""

from pathnice.core import lowpath
from pathnice.core.errors import (
    IncompatiblePathError,
    PathArgumentError,
    PathConflictError,
    PathNiceError,
    UnsupportedFileSystemError,
)
from pathnice.core.factory import PathModule, cache_info, get_path_module
from pathnice.core.io import default_fs

# Native flavor on the real filesystem, plus its fixed-flavor siblings
path = get_path_module(lowpath.native, default_fs)
posix = path.posix
win32 = path.win32

__all__ = [
    "path",
    "posix",
    "win32",
    "get_path_module",
    "cache_info",
    "PathModule",
    # Errors
    "PathNiceError",
    "UnsupportedFileSystemError",
    "PathArgumentError",
    "IncompatiblePathError",
    "PathConflictError",
]
