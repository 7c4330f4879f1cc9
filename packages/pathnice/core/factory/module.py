"""Path modules: callable drop-in replacements for a platform path implementation."""

from __future__ import annotations

import functools
import logging
from typing import Any

from pathnice.core.errors import PathArgumentError
from pathnice.core.io import FileSystem
from pathnice.core.lowpath import PLATFORM_PATH_API, sibling
from pathnice.core.nice import PathNiceArrBase, PathNiceBase, gen_path_nice

logger = logging.getLogger(__name__)


class PathModule:
    """
    Path implementation bound to a filesystem.

    Calling the module builds path values; every function and constant of the
    path implementation listed in ``PLATFORM_PATH_API`` is available on the
    module as the very same object, so it can stand in for ``os.path``.

    Example:
        >>> from pathnice.core import path
        >>> path.join("a", "b") == os.path.join("a", "b")
        True
        >>> path("a", "b")
        PathNiceArrPosix(['a', 'b'])

    ``posix`` and ``win32`` are the sibling modules on the same filesystem.
    They are resolved through the module cache on first access and never
    change afterwards. Modules are immutable.
    """

    lowpath: Any
    fs: FileSystem
    PathNice: type[PathNiceBase]
    PathNiceArr: type[PathNiceArrBase]

    def __init__(self, lowpath: Any, fs: FileSystem) -> None:
        path_cls, arr_cls = gen_path_nice(lowpath, fs)
        object.__setattr__(self, "lowpath", lowpath)
        object.__setattr__(self, "fs", fs)
        object.__setattr__(self, "PathNice", path_cls)
        object.__setattr__(self, "PathNiceArr", arr_cls)

        for name in PLATFORM_PATH_API:
            if hasattr(lowpath, name):
                object.__setattr__(self, name, getattr(lowpath, name))

    def __call__(self, *args: Any) -> PathNiceBase | PathNiceArrBase:
        """
        Build a path value or a path set.

        One non-sequence argument gives a path value; one list or tuple (a
        path set included) or several arguments give a path set.

        Raises:
            PathArgumentError: If called without arguments or with an
                unsupported item
            IncompatiblePathError: If an item is bound to another module
        """
        if not args:
            raise PathArgumentError("path(): One or more arguments must be provided.")
        if len(args) == 1:
            (arg,) = args
            if isinstance(arg, (list, tuple)):
                return self.PathNiceArr._from(arg)
            return self.PathNice._coerce(arg)
        return self.PathNiceArr._from(args)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Path modules are immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path modules are immutable (cannot delete {name!r})")

    def __repr__(self) -> str:
        flavor = getattr(self.lowpath, "name", type(self.lowpath).__name__)
        return f"<PathModule {flavor} on {type(self.fs).__name__}>"

    def bind_fs(self, fs: FileSystem) -> PathModule:
        """The module for the same path implementation on another filesystem."""
        from pathnice.core.factory.cache import get_path_module

        return get_path_module(self.lowpath, fs)

    def _sibling(self, flavor: str) -> PathModule:
        from pathnice.core.factory.cache import get_path_module

        logger.debug(f"Resolving {flavor} sibling of {self!r}")
        return get_path_module(sibling(self.lowpath, flavor), self.fs)

    @functools.cached_property
    def posix(self) -> PathModule:
        return self._sibling("posix")

    @functools.cached_property
    def win32(self) -> PathModule:
        return self._sibling("win32")


def build_path_module(lowpath: Any, fs: FileSystem) -> PathModule:
    """Build a new, uncached module. Use ``get_path_module`` to share modules."""
    logger.debug(f"Building path module for {getattr(lowpath, 'name', lowpath)!r}")
    return PathModule(lowpath, fs)
