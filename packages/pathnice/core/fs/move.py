"""move helper.

Moves files and directories through a FileSystem, following the behavior of
fs-extra's move (MIT License, Copyright (c) 2011-2017 JP Richardson).
"""

from __future__ import annotations

import errno

from pathnice.core.errors import PathConflictError
from pathnice.core.fs.copy import copy, is_src_subdir, stat_or_none
from pathnice.core.fs.ensure import ensure_dir
from pathnice.core.fs.models import CopyOptions, MoveOptions
from pathnice.core.fs.remove import remove
from pathnice.core.io import FileSystem, is_dir, same_entry
from pathnice.core.lowpath import PlatformPath
from pathnice.core.utils.logging import get_logger

logger = get_logger(__name__)


async def _check_paths(lowpath: PlatformPath, fs: FileSystem, src: str, dest: str) -> bool:
    """Validate a move; returns True when it only changes the case of the name."""
    src_st = await fs.stat(src)
    dest_st = await stat_or_none(fs, dest)

    if dest_st is not None:
        if same_entry(src_st, dest_st):
            src_base = lowpath.basename(src)
            dest_base = lowpath.basename(dest)
            if src_base != dest_base and src_base.lower() == dest_base.lower():
                return True
            raise PathConflictError("move", src, "and dest must not be the same.")
        if is_dir(src_st) and not is_dir(dest_st):
            raise PathConflictError(
                "move", dest, f"is not a directory and cannot be overwritten with directory {src}."
            )
        if not is_dir(src_st) and is_dir(dest_st):
            raise PathConflictError(
                "move", dest, f"is a directory and cannot be overwritten with non-directory {src}."
            )

    if is_dir(src_st) and is_src_subdir(lowpath, src, dest):
        raise PathConflictError("move", src, f"cannot be moved to a subdirectory of itself, {dest}.")
    return False


async def _rename(
    lowpath: PlatformPath, fs: FileSystem, src: str, dest: str, overwrite: bool
) -> None:
    try:
        await fs.rename(src, dest)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        logger.debug(f"Cross-device move of {src}, copying instead")
        await copy(lowpath, fs, src, dest, CopyOptions(force=overwrite, error_on_exist=True))
        await remove(fs, src)


async def move(
    lowpath: PlatformPath,
    fs: FileSystem,
    src: str,
    dest: str,
    options: MoveOptions | None = None,
) -> None:
    """
    Move a file or directory from ``src`` to ``dest``.

    Missing parents of ``dest`` are created. Without ``overwrite`` an existing
    ``dest`` is a conflict; with it, ``dest`` is removed first.

    Raises:
        PathConflictError: On same-path, subdirectory or kind conflicts, or an
            existing dest without ``overwrite``
        OSError: Any filesystem error, unchanged
    """
    options = options or MoveOptions()

    is_changing_case = await _check_paths(lowpath, fs, src, dest)

    parent = lowpath.dirname(dest)
    if parent and lowpath.parse(parent).root != parent:
        await ensure_dir(fs, parent)

    if not is_changing_case:
        if options.overwrite:
            await remove(fs, dest)
        elif await stat_or_none(fs, dest, follow=False) is not None:
            raise PathConflictError("move", dest, "already exists.")

    await _rename(lowpath, fs, src, dest, options.overwrite)
    logger.debug(f"Moved {src} to {dest}")
