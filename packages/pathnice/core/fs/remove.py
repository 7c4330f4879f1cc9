"""remove helper."""

from __future__ import annotations

from pathnice.core.io import FileSystem, is_dir, is_not_found, is_symlink
from pathnice.core.utils.logging import get_logger

logger = get_logger(__name__)


async def remove(fs: FileSystem, target: str) -> None:
    """
    Remove ``target`` whether it is a file, a link or a directory tree.

    A missing ``target`` is not an error. Uses the filesystem's ``rm``
    primitive when it has one; otherwise inspects ``target`` with ``lstat``
    and dispatches to ``rmdir`` (recursive) or ``unlink``.
    """
    rm = getattr(fs, "rm", None)
    if rm is not None:
        await rm(target, recursive=True, force=True)
        return

    try:
        st = await fs.lstat(target)
    except OSError as e:
        if is_not_found(e):
            logger.debug(f"Nothing to remove at {target}")
            return
        raise

    if is_dir(st) and not is_symlink(st):
        await fs.rmdir(target, recursive=True)
    else:
        await fs.unlink(target)
    logger.debug(f"Removed {target}")
