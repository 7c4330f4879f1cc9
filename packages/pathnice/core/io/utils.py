"""Utility functions for filesystem results and errors."""

import errno
import os
import stat


def is_not_found(error: BaseException) -> bool:
    """
    Whether an error means "the path does not exist".

    This is the single predicate used to select idempotent fallbacks.

    Example:
        >>> is_not_found(FileNotFoundError(errno.ENOENT, "No such file", "/x"))
        True
        >>> is_not_found(PermissionError(errno.EACCES, "Permission denied", "/x"))
        False
    """
    if isinstance(error, FileNotFoundError):
        return True
    return isinstance(error, OSError) and error.errno == errno.ENOENT


def is_dir(st: os.stat_result) -> bool:
    return stat.S_ISDIR(st.st_mode)


def is_file(st: os.stat_result) -> bool:
    return stat.S_ISREG(st.st_mode)


def is_symlink(st: os.stat_result) -> bool:
    return stat.S_ISLNK(st.st_mode)


def same_entry(a: os.stat_result, b: os.stat_result) -> bool:
    """Whether two stat results describe the same filesystem entry."""
    return a.st_ino == b.st_ino and a.st_dev == b.st_dev and a.st_ino != 0
