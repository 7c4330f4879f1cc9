"""empty_dir helper."""

from __future__ import annotations

from pathnice.core.fs.ensure import ensure_dir
from pathnice.core.fs.remove import remove
from pathnice.core.io import FileSystem
from pathnice.core.lowpath import PlatformPath
from pathnice.core.utils.concurrency import gather_settled
from pathnice.core.utils.logging import get_logger


async def empty_dir(lowpath: PlatformPath, fs: FileSystem, target: str) -> None:
    """
    Make ``target`` an empty directory.

    Children are removed concurrently. The helper waits for every removal to
    finish, then fails with the first error if any failed; children already
    removed stay removed.
    """
    log = get_logger(__name__, path=target)
    try:
        names = await fs.listdir(target)
    except OSError as e:
        log.debug(f"Cannot list {target} ({e}), creating it instead")
        await ensure_dir(fs, target)
        return

    await gather_settled(remove(fs, lowpath.join(target, name)) for name in names)
    log.debug(f"Emptied {target} ({len(names)} entries removed)")
