"""Protocols for filesystem operations.

Defines the async filesystem capability consumed by path-nice.
"""

import os
from typing import Protocol

from .models import WriteResult


class FileSystem(Protocol):
    """
    Protocol for async filesystem operations.

    Every failure is an ``OSError`` subclass; a missing entry is reported as
    ``FileNotFoundError``. Implementations are compared by identity.

    Implementations may additionally offer a single recursive removal
    primitive::

        async def rm(self, path: str, recursive: bool = False, force: bool = False) -> None

    which ``pathnice.core.fs.remove`` prefers when present.
    """

    # Metadata (async)
    async def stat(self, path: str) -> os.stat_result:
        """Stat a path, following symbolic links."""
        ...

    async def lstat(self, path: str) -> os.stat_result:
        """Stat a path without following a final symbolic link."""
        ...

    async def realpath(self, path: str) -> str:
        """Canonical path with symbolic links resolved."""
        ...

    # Directory operations (async)
    async def listdir(self, path: str) -> list[str]:
        """
        List directory contents (names only).

        Raises:
            FileNotFoundError: If directory doesn't exist
            NotADirectoryError: If path is not a directory
        """
        ...

    async def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> None:
        """
        Create a directory.

        Args:
            path: Directory path
            mode: Permission bits (subject to umask)
            recursive: Create missing parents and accept an existing directory

        Raises:
            FileExistsError: If path exists (as anything, or as a non-directory
                when recursive)
            FileNotFoundError: If the parent is missing and not recursive
        """
        ...

    async def rmdir(self, path: str, recursive: bool = False) -> None:
        """
        Remove a directory.

        Raises:
            FileNotFoundError: If directory doesn't exist
            OSError: If not empty and not recursive
        """
        ...

    # File operations (async)
    async def read_file(self, path: str) -> bytes:
        """Read a whole file."""
        ...

    async def write_file(
        self,
        path: str,
        data: bytes,
        mode: int | None = None,
        append: bool = False,
    ) -> WriteResult:
        """
        Write bytes to a file, creating it if needed.

        The parent directory must exist.

        Args:
            path: Target file path
            data: Bytes to write
            mode: Permission bits used when the file is created
            append: Append instead of truncating
        """
        ...

    async def unlink(self, path: str) -> None:
        """Remove a file or symbolic link."""
        ...

    async def rename(self, src: str, dest: str) -> None:
        """Rename ``src`` to ``dest``, replacing ``dest`` if allowed by the OS."""
        ...

    async def copy_file(self, src: str, dest: str) -> None:
        """Copy file contents from ``src`` to ``dest`` (no metadata)."""
        ...

    # Links (async)
    async def symlink(self, target: str, path: str) -> None:
        """Create a symbolic link at ``path`` pointing to ``target``."""
        ...

    async def readlink(self, path: str) -> str:
        """Target of a symbolic link."""
        ...

    # Attributes (async)
    async def chmod(self, path: str, mode: int) -> None:
        """Change permission bits."""
        ...

    async def chown(self, path: str, uid: int, gid: int) -> None:
        """Change owner, following symbolic links."""
        ...

    async def lchown(self, path: str, uid: int, gid: int) -> None:
        """Change owner of a symbolic link itself."""
        ...

    async def utime(self, path: str, atime: float, mtime: float) -> None:
        """Set access and modification times."""
        ...
