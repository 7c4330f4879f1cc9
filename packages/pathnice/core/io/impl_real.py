"""Real filesystem implementation using aiofiles for async I/O.

Operations aiofiles does not wrap run in the loop's default executor, so no
call blocks the event loop.
"""

import asyncio
import logging
import os
import shutil
import time

import aiofiles  # type: ignore[import-untyped]
import aiofiles.os  # type: ignore[import-untyped]

from .models import WriteResult
from .utils import is_dir, is_not_found, is_symlink

logger = logging.getLogger(__name__)


class RealFileSystem:
    """
    Real filesystem implementation using aiofiles for async I/O.

    Offers the optional ``rm`` primitive, so recursive removal is a single call.
    """

    def __repr__(self) -> str:
        return "RealFileSystem()"

    async def _run(self, func, *args):
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, func, *args)

    async def stat(self, path: str) -> os.stat_result:
        """Stat asynchronously (follows links)."""
        return await aiofiles.os.stat(path)

    async def lstat(self, path: str) -> os.stat_result:
        """Stat asynchronously (does not follow a final link)."""
        return await self._run(os.lstat, path)

    async def realpath(self, path: str) -> str:
        """Resolve links asynchronously."""
        return await self._run(os.path.realpath, path)

    async def listdir(self, path: str) -> list[str]:
        """List directory contents asynchronously."""
        entries: list[str] = await aiofiles.os.listdir(path)
        return entries

    async def mkdir(self, path: str, mode: int = 0o777, recursive: bool = False) -> None:
        """Create directory asynchronously."""
        if recursive:
            await aiofiles.os.makedirs(path, mode, exist_ok=True)
        else:
            await aiofiles.os.mkdir(path, mode)

    async def rmdir(self, path: str, recursive: bool = False) -> None:
        """Remove directory asynchronously."""
        if recursive:
            # shutil.rmtree is blocking, run in executor
            await self._run(shutil.rmtree, path)
        else:
            await aiofiles.os.rmdir(path)

    async def rm(self, path: str, recursive: bool = False, force: bool = False) -> None:
        """Remove a file, link or directory asynchronously."""
        try:
            st = await self.lstat(path)
        except OSError as e:
            if force and is_not_found(e):
                return
            raise

        if is_dir(st) and not is_symlink(st):
            await self.rmdir(path, recursive=recursive)
        else:
            await aiofiles.os.unlink(path)
        logger.debug(f"Removed {path}")

    async def read_file(self, path: str) -> bytes:
        """Read file asynchronously."""
        async with aiofiles.open(path, mode="rb") as f:
            content: bytes = await f.read()
            return content

    async def write_file(
        self,
        path: str,
        data: bytes,
        mode: int | None = None,
        append: bool = False,
    ) -> WriteResult:
        """Write file asynchronously."""
        start = time.perf_counter()
        open_mode = "ab" if append else "wb"

        if mode is None:
            async with aiofiles.open(path, mode=open_mode) as f:
                await f.write(data)
        else:

            def opener(file: str, flags: int) -> int:
                return os.open(file, flags, mode)

            async with aiofiles.open(path, mode=open_mode, opener=opener) as f:
                await f.write(data)

        duration = (time.perf_counter() - start) * 1000
        return WriteResult(path=str(path), bytes_written=len(data), duration_ms=duration)

    async def unlink(self, path: str) -> None:
        """Remove file asynchronously."""
        await aiofiles.os.unlink(path)

    async def rename(self, src: str, dest: str) -> None:
        """Rename asynchronously."""
        await aiofiles.os.rename(src, dest)

    async def copy_file(self, src: str, dest: str) -> None:
        """Copy file contents asynchronously."""
        await self._run(shutil.copyfile, src, dest)

    async def symlink(self, target: str, path: str) -> None:
        """Create a symbolic link asynchronously."""
        await aiofiles.os.symlink(target, path)

    async def readlink(self, path: str) -> str:
        """Read a symbolic link asynchronously."""
        target: str = await aiofiles.os.readlink(path)
        return target

    async def chmod(self, path: str, mode: int) -> None:
        await self._run(os.chmod, path, mode)

    async def chown(self, path: str, uid: int, gid: int) -> None:
        await self._run(os.chown, path, uid, gid)

    async def lchown(self, path: str, uid: int, gid: int) -> None:
        await self._run(os.lchown, path, uid, gid)

    async def utime(self, path: str, atime: float, mtime: float) -> None:
        await self._run(os.utime, path, (atime, mtime))
