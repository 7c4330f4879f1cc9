"""In-memory filesystem for fast, isolated testing.

Simulates POSIX filesystem operations without disk I/O.
Async operations complete immediately but maintain async interface.
"""

from __future__ import annotations

import errno
import itertools
import os
import posixpath
import stat
import time
from dataclasses import dataclass, field

from .models import WriteResult

_MAX_SYMLINK_DEPTH = 40


@dataclass
class _Node:
    kind: int  # stat.S_IFREG, stat.S_IFDIR or stat.S_IFLNK
    perm: int
    ino: int
    data: bytes = b""
    target: str = ""
    uid: int = 0
    gid: int = 0
    atime: float = field(default_factory=time.time)
    mtime: float = field(default_factory=time.time)

    def to_stat(self) -> os.stat_result:
        if self.kind == stat.S_IFLNK:
            size = len(self.target)
        else:
            size = len(self.data)
        return os.stat_result(
            (self.kind | self.perm, self.ino, 1, 1, self.uid, self.gid, size, self.atime, self.mtime, self.mtime)
        )


def _error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class FakeFileSystem:
    """
    In-memory async filesystem for testing.

    POSIX paths only; relative paths are resolved against ``cwd``. Does not
    offer the optional ``rm`` primitive, so removal goes through
    ``lstat``/``rmdir``/``unlink``. Not thread-safe (use per-test instance).
    """

    def __init__(self, cwd: str = "/", umask: int = 0o022) -> None:
        self.cwd = cwd
        self.umask = umask
        self._ino = itertools.count(1)
        self._nodes: dict[str, _Node] = {"/": self._new(stat.S_IFDIR, 0o755)}

    def __repr__(self) -> str:
        return f"FakeFileSystem(entries={len(self._nodes)})"

    def _new(self, kind: int, perm: int, **kwargs) -> _Node:
        return _Node(kind=kind, perm=perm & 0o7777, ino=next(self._ino), **kwargs)

    def _abs(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self.cwd, os.fspath(path)))

    def _resolve(self, path: str, follow: bool = True, depth: int = 0) -> str:
        """Resolve symbolic links in every component (only the last if ``follow``)."""
        if depth > _MAX_SYMLINK_DEPTH:
            raise _error(OSError, errno.ELOOP, path)

        parts = [p for p in self._abs(path).split("/") if p]
        current = "/"
        for index, part in enumerate(parts):
            candidate = posixpath.join(current, part)
            node = self._nodes.get(candidate)
            is_last = index == len(parts) - 1
            if node is None:
                return posixpath.join(candidate, *parts[index + 1 :])
            if node.kind == stat.S_IFLNK and (follow or not is_last):
                target = posixpath.join(current, node.target)
                rest = posixpath.join(target, *parts[index + 1 :])
                return self._resolve(rest, follow, depth + 1)
            if node.kind != stat.S_IFDIR and not is_last:
                raise _error(NotADirectoryError, errno.ENOTDIR, path)
            current = candidate
        return current

    def _lookup(self, path: str, follow: bool = True) -> tuple[str, _Node]:
        resolved = self._resolve(path, follow)
        node = self._nodes.get(resolved)
        if node is None:
            raise _error(FileNotFoundError, errno.ENOENT, path)
        return resolved, node

    def _parent_dir(self, path: str) -> str:
        """Resolved parent of ``path``, which must be an existing directory."""
        resolved = self._resolve(path, follow=False)
        parent = posixpath.dirname(resolved)
        node = self._nodes.get(parent)
        if node is None:
            raise _error(FileNotFoundError, errno.ENOENT, path)
        if node.kind != stat.S_IFDIR:
            raise _error(NotADirectoryError, errno.ENOTDIR, path)
        return resolved

    def _children(self, resolved: str) -> list[str]:
        prefix = resolved.rstrip("/") + "/"
        return [p for p in self._nodes if p.startswith(prefix) and p != prefix]

    async def stat(self, path: str) -> os.stat_result:
        """Stat (async, immediate)."""
        return self._lookup(path)[1].to_stat()

    async def lstat(self, path: str) -> os.stat_result:
        """Stat without following a final link (async, immediate)."""
        return self._lookup(path, follow=False)[1].to_stat()

    async def realpath(self, path: str) -> str:
        """Resolve links (async, immediate)."""
        return self._resolve(path)

    async def listdir(self, path: str) -> list[str]:
        """List directory (async, immediate)."""
        resolved, node = self._lookup(path)
        if node.kind != stat.S_IFDIR:
            raise _error(NotADirectoryError, errno.ENOTDIR, path)

        prefix = resolved.rstrip("/") + "/"
        return sorted(p[len(prefix) :] for p in self._children(resolved) if "/" not in p[len(prefix) :])

    async def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> None:
        """Create directory (async, immediate)."""
        if not recursive:
            resolved = self._parent_dir(path)
            if resolved in self._nodes:
                raise _error(FileExistsError, errno.EEXIST, path)
            self._nodes[resolved] = self._new(stat.S_IFDIR, mode & ~self.umask)
            return

        parts = [p for p in self._abs(path).split("/") if p]
        current = "/"
        for index, part in enumerate(parts):
            current = self._resolve(posixpath.join(current, part))
            node = self._nodes.get(current)
            if node is None:
                self._nodes[current] = self._new(stat.S_IFDIR, mode & ~self.umask)
            elif node.kind != stat.S_IFDIR:
                if index == len(parts) - 1:
                    raise _error(FileExistsError, errno.EEXIST, path)
                raise _error(NotADirectoryError, errno.ENOTDIR, path)

    async def rmdir(self, path: str, recursive: bool = False) -> None:
        """Remove directory (async, immediate)."""
        resolved, node = self._lookup(path, follow=False)
        if node.kind != stat.S_IFDIR:
            raise _error(NotADirectoryError, errno.ENOTDIR, path)
        if resolved == "/":
            raise _error(OSError, errno.EBUSY, path)

        children = self._children(resolved)
        if children and not recursive:
            raise _error(OSError, errno.ENOTEMPTY, path)
        for child in children:
            del self._nodes[child]
        del self._nodes[resolved]

    async def read_file(self, path: str) -> bytes:
        """Read file (async, immediate)."""
        _, node = self._lookup(path)
        if node.kind == stat.S_IFDIR:
            raise _error(IsADirectoryError, errno.EISDIR, path)
        node.atime = time.time()
        return node.data

    async def write_file(
        self,
        path: str,
        data: bytes,
        mode: int | None = None,
        append: bool = False,
    ) -> WriteResult:
        """Write file (async, immediate). The parent directory must exist."""
        resolved = self._parent_dir(self._resolve(path))
        node = self._nodes.get(resolved)
        if node is None:
            perm = 0o666 if mode is None else mode
            node = self._new(stat.S_IFREG, perm & ~self.umask)
            self._nodes[resolved] = node
        elif node.kind == stat.S_IFDIR:
            raise _error(IsADirectoryError, errno.EISDIR, path)

        node.data = node.data + bytes(data) if append else bytes(data)
        node.mtime = time.time()
        return WriteResult(path=resolved, bytes_written=len(data), duration_ms=0.0)

    async def unlink(self, path: str) -> None:
        """Remove file or link (async, immediate)."""
        resolved, node = self._lookup(path, follow=False)
        if node.kind == stat.S_IFDIR:
            raise _error(IsADirectoryError, errno.EISDIR, path)
        del self._nodes[resolved]

    async def rename(self, src: str, dest: str) -> None:
        """Rename (async, immediate)."""
        src_resolved, src_node = self._lookup(src, follow=False)
        dest_resolved = self._parent_dir(dest)
        if src_resolved == dest_resolved:
            return
        if dest_resolved.startswith(src_resolved.rstrip("/") + "/"):
            raise _error(OSError, errno.EINVAL, dest)

        dest_node = self._nodes.get(dest_resolved)
        if dest_node is not None:
            if src_node.kind == stat.S_IFDIR and dest_node.kind != stat.S_IFDIR:
                raise _error(NotADirectoryError, errno.ENOTDIR, dest)
            if src_node.kind != stat.S_IFDIR and dest_node.kind == stat.S_IFDIR:
                raise _error(IsADirectoryError, errno.EISDIR, dest)
            if dest_node.kind == stat.S_IFDIR and self._children(dest_resolved):
                raise _error(OSError, errno.ENOTEMPTY, dest)

        moved = [src_resolved, *self._children(src_resolved)]
        nodes = {old: self._nodes.pop(old) for old in moved}
        for old, node in nodes.items():
            self._nodes[dest_resolved + old[len(src_resolved) :]] = node

    async def copy_file(self, src: str, dest: str) -> None:
        """Copy file contents (async, immediate)."""
        data = await self.read_file(src)
        await self.write_file(dest, data)

    async def symlink(self, target: str, path: str) -> None:
        """Create a symbolic link (async, immediate)."""
        resolved = self._parent_dir(path)
        if resolved in self._nodes:
            raise _error(FileExistsError, errno.EEXIST, path)
        self._nodes[resolved] = self._new(stat.S_IFLNK, 0o777, target=target)

    async def readlink(self, path: str) -> str:
        """Read a symbolic link (async, immediate)."""
        _, node = self._lookup(path, follow=False)
        if node.kind != stat.S_IFLNK:
            raise _error(OSError, errno.EINVAL, path)
        return node.target

    async def chmod(self, path: str, mode: int) -> None:
        self._lookup(path)[1].perm = mode & 0o7777

    async def chown(self, path: str, uid: int, gid: int) -> None:
        node = self._lookup(path)[1]
        node.uid, node.gid = uid, gid

    async def lchown(self, path: str, uid: int, gid: int) -> None:
        node = self._lookup(path, follow=False)[1]
        node.uid, node.gid = uid, gid

    async def utime(self, path: str, atime: float, mtime: float) -> None:
        node = self._lookup(path)[1]
        node.atime, node.mtime = atime, mtime
