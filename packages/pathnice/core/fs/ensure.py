"""ensure_dir / ensure_file helpers."""

from __future__ import annotations

from pathnice.core.errors import PathConflictError
from pathnice.core.fs.models import EnsureDirOptions, EnsureFileOptions
from pathnice.core.io import FileSystem, is_dir, is_file, is_not_found
from pathnice.core.lowpath import PlatformPath
from pathnice.core.utils.logging import get_logger

logger = get_logger(__name__)


async def ensure_dir(
    fs: FileSystem, target: str, options: EnsureDirOptions | None = None
) -> None:
    """
    Create ``target`` and any missing parents.

    Succeeds silently if ``target`` already is a directory. Any other error,
    including ``FileExistsError`` when ``target`` exists as a non-directory,
    propagates.
    """
    options = options or EnsureDirOptions()
    if options.mode is None:
        await fs.mkdir(target, recursive=True)
    else:
        await fs.mkdir(target, mode=options.mode, recursive=True)
    logger.debug(f"Ensured directory exists: {target}")


async def _create_empty_file(fs: FileSystem, target: str, options: EnsureFileOptions) -> None:
    await fs.write_file(target, b"", mode=options.file_mode)
    logger.debug(f"Created empty file: {target}")


async def ensure_file(
    lowpath: PlatformPath,
    fs: FileSystem,
    target: str,
    options: EnsureFileOptions | None = None,
) -> None:
    """
    Make sure ``target`` is a regular file, creating it empty if missing.

    Raises:
        PathConflictError: If ``target`` exists and is not a regular file, or
            its parent exists and is not a directory
        OSError: Any other filesystem error, unchanged
    """
    options = options or EnsureFileOptions()
    try:
        st = await fs.stat(target)
    except (FileNotFoundError, NotADirectoryError):
        pass
    else:
        if is_file(st):
            return
        raise PathConflictError("ensure_file", target, "already exists and is not a file.")

    dirname = lowpath.dirname(target) or lowpath.curdir
    try:
        parent_st = await fs.stat(dirname)
    except OSError as e:
        if not is_not_found(e):
            raise
        await ensure_dir(fs, dirname, EnsureDirOptions(mode=options.dir_mode))
        await _create_empty_file(fs, target, options)
        return

    if not is_dir(parent_st):
        raise PathConflictError("ensure_file", dirname, "already exists and is not a directory.")
    await _create_empty_file(fs, target, options)
