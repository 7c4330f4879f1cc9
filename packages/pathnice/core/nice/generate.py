"""Generation of path value classes bound to one (path implementation, filesystem) pair."""

from __future__ import annotations

import logging
from typing import Any

from pathnice.core.io import FileSystem
from pathnice.core.nice.path_nice import PathNiceBase
from pathnice.core.nice.path_nice_arr import PathNiceArrBase

logger = logging.getLogger(__name__)


def flavor_suffix(lowpath: Any) -> str:
    """Class name suffix for a path implementation ('posix' -> 'Posix')."""
    name = str(getattr(lowpath, "name", "") or type(lowpath).__name__)
    return name[:1].upper() + name[1:]


def gen_path_nice(
    lowpath: Any, fs: FileSystem
) -> tuple[type[PathNiceBase], type[PathNiceArrBase]]:
    """
    Create the path value class and its set class for ``lowpath`` and ``fs``.

    Example:
        >>> PathNice, PathNiceArr = gen_path_nice(lowpath.posix, FakeFileSystem())
        >>> PathNice.__name__
        'PathNicePosix'
    """
    suffix = flavor_suffix(lowpath)
    path_cls: Any = type(
        f"PathNice{suffix}",
        (PathNiceBase,),
        {"__slots__": (), "__module__": PathNiceBase.__module__, "lowpath": lowpath, "default_fs": fs},
    )
    arr_cls: Any = type(
        f"PathNiceArr{suffix}",
        (PathNiceArrBase,),
        {"__module__": PathNiceArrBase.__module__, "_path_cls": path_cls},
    )
    path_cls._arr_cls = arr_cls
    logger.debug(f"Generated {path_cls.__name__} for {type(fs).__name__}")
    return path_cls, arr_cls
