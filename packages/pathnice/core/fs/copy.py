"""copy helper.

Copies files, symbolic links and directory trees through a FileSystem,
following the behavior of fs-extra's copy (MIT License, Copyright (c)
2011-2017 JP Richardson).
"""

from __future__ import annotations

import inspect
import os
import stat

from pathnice.core.errors import PathConflictError
from pathnice.core.fs.ensure import ensure_dir
from pathnice.core.fs.models import CopyOptions
from pathnice.core.io import FileSystem, is_dir, is_not_found, is_symlink, same_entry
from pathnice.core.lowpath import PlatformPath
from pathnice.core.utils.logging import get_logger

logger = get_logger(__name__)


async def stat_or_none(fs: FileSystem, path: str, follow: bool = True) -> os.stat_result | None:
    """Stat ``path``, returning None if it does not exist."""
    try:
        return await (fs.stat(path) if follow else fs.lstat(path))
    except OSError as e:
        if is_not_found(e):
            return None
        raise


def is_src_subdir(lowpath: PlatformPath, src: str, dest: str) -> bool:
    """Whether ``dest`` is ``src`` or lies below it."""
    src_parts = [p for p in lowpath.resolve(src).split(lowpath.sep) if p]
    dest_parts = [p for p in lowpath.resolve(dest).split(lowpath.sep) if p]
    if len(dest_parts) < len(src_parts):
        return False
    return dest_parts[: len(src_parts)] == src_parts


async def _check_paths(
    lowpath: PlatformPath, fs: FileSystem, src: str, dest: str, options: CopyOptions
) -> tuple[os.stat_result, os.stat_result | None]:
    src_st = await (fs.stat(src) if options.dereference else fs.lstat(src))
    dest_st = await stat_or_none(fs, dest, follow=options.dereference)

    if dest_st is not None:
        if same_entry(src_st, dest_st):
            raise PathConflictError("copy", src, "and dest cannot be the same.")
        if is_dir(src_st) and not is_dir(dest_st):
            raise PathConflictError(
                "copy", dest, f"is not a directory and cannot be overwritten with directory {src}."
            )
        if not is_dir(src_st) and is_dir(dest_st):
            raise PathConflictError(
                "copy", dest, f"is a directory and cannot be overwritten with non-directory {src}."
            )

    if is_dir(src_st) and is_src_subdir(lowpath, src, dest):
        raise PathConflictError("copy", src, f"cannot be copied to a subdirectory of itself, {dest}.")
    return src_st, dest_st


async def _accepts(options: CopyOptions, src: str, dest: str) -> bool:
    if options.filter is None:
        return True
    result = options.filter(src, dest)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


async def _set_times(fs: FileSystem, dest: str, src_st: os.stat_result) -> None:
    await fs.utime(dest, src_st.st_atime, src_st.st_mtime)


async def _copy_file(
    fs: FileSystem, src: str, dest: str, src_st: os.stat_result, dest_exists: bool, options: CopyOptions
) -> None:
    if dest_exists:
        if options.force:
            await fs.unlink(dest)
        elif options.error_on_exist:
            raise PathConflictError("copy", dest, "already exists.")
        else:
            return

    await fs.copy_file(src, dest)
    await fs.chmod(dest, stat.S_IMODE(src_st.st_mode))
    if options.preserve_timestamps:
        await _set_times(fs, dest, src_st)


async def _copy_dir(
    lowpath: PlatformPath,
    fs: FileSystem,
    src: str,
    dest: str,
    src_st: os.stat_result,
    dest_exists: bool,
    options: CopyOptions,
) -> None:
    if not dest_exists:
        await fs.mkdir(dest)

    for name in await fs.listdir(src):
        child_src = lowpath.join(src, name)
        child_dest = lowpath.join(dest, name)
        if not await _accepts(options, child_src, child_dest):
            continue
        child_st, child_dest_st = await _check_paths(lowpath, fs, child_src, child_dest, options)
        await _copy_entry(lowpath, fs, child_src, child_dest, child_st, child_dest_st, options)

    if not dest_exists:
        await fs.chmod(dest, stat.S_IMODE(src_st.st_mode))
    if options.preserve_timestamps:
        await _set_times(fs, dest, src_st)


async def _copy_link(
    lowpath: PlatformPath, fs: FileSystem, src: str, dest: str, dest_exists: bool, options: CopyOptions
) -> None:
    target = await fs.readlink(src)
    if not options.verbatim_symlinks and not lowpath.is_absolute(target):
        target = lowpath.resolve(lowpath.dirname(src), target)

    if dest_exists:
        await fs.unlink(dest)
    await fs.symlink(target, dest)


async def _copy_entry(
    lowpath: PlatformPath,
    fs: FileSystem,
    src: str,
    dest: str,
    src_st: os.stat_result,
    dest_st: os.stat_result | None,
    options: CopyOptions,
) -> None:
    dest_exists = dest_st is not None
    mode = src_st.st_mode

    if stat.S_ISDIR(mode):
        if not options.recursive:
            raise PathConflictError("copy", src, "is a directory (not copied).")
        await _copy_dir(lowpath, fs, src, dest, src_st, dest_exists, options)
    elif stat.S_ISREG(mode) or stat.S_ISCHR(mode) or stat.S_ISBLK(mode):
        await _copy_file(fs, src, dest, src_st, dest_exists, options)
    elif is_symlink(src_st):
        await _copy_link(lowpath, fs, src, dest, dest_exists, options)
    elif stat.S_ISSOCK(mode):
        raise PathConflictError("copy", src, "is a socket file and cannot be copied.")
    elif stat.S_ISFIFO(mode):
        raise PathConflictError("copy", src, "is a FIFO pipe and cannot be copied.")
    else:
        raise PathConflictError("copy", src, "has an unknown file type and cannot be copied.")


async def copy(
    lowpath: PlatformPath,
    fs: FileSystem,
    src: str,
    dest: str,
    options: CopyOptions | None = None,
) -> None:
    """
    Copy a file, symbolic link or directory tree from ``src`` to ``dest``.

    Missing parents of ``dest`` are created.

    Raises:
        PathConflictError: If src and dest are the same entry, a directory
            would be copied into itself, kinds of src and dest clash, or dest
            exists with ``force`` off and ``error_on_exist`` on
        OSError: Any filesystem error, unchanged
    """
    options = options or CopyOptions()

    src_st, dest_st = await _check_paths(lowpath, fs, src, dest, options)
    if not await _accepts(options, src, dest):
        logger.debug(f"Copy of {src} skipped by filter")
        return

    parent = lowpath.dirname(dest)
    if parent:
        await ensure_dir(fs, parent)

    await _copy_entry(lowpath, fs, src, dest, src_st, dest_st, options)
    logger.debug(f"Copied {src} to {dest}")
