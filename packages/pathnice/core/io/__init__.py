"""Filesystem abstraction layer for path-nice.

Provides async-first filesystem implementations behind one protocol.

Example:
    >>> from pathnice.core.io import FakeFileSystem
    >>> fs = FakeFileSystem()
    >>> await fs.mkdir("/tmp/cache", recursive=True)
    >>> await fs.write_file("/tmp/cache/test.txt", b"Hello, world!")
    >>> await fs.read_file("/tmp/cache/test.txt")
    b'Hello, world!'
"""

from .impl_fake import FakeFileSystem
from .impl_real import RealFileSystem
from .models import WriteResult
from .protocols import FileSystem
from .utils import is_dir, is_file, is_not_found, is_symlink, same_entry

# Process-wide default filesystem, used when no filesystem is bound explicitly.
default_fs = RealFileSystem()

__all__ = [
    # Protocols
    "FileSystem",
    # Result types
    "WriteResult",
    # Implementations
    "RealFileSystem",
    "FakeFileSystem",
    "default_fs",
    # Utilities
    "is_not_found",
    "is_dir",
    "is_file",
    "is_symlink",
    "same_entry",
]
