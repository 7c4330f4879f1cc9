"""Immutable ordered sets of path values with batch operations."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Callable, Iterable
from typing import Any, ClassVar

from watchfiles import Change, awatch

from pathnice.core.fs.models import CopyOptions, MoveOptions
from pathnice.core.io import FileSystem
from pathnice.core.nice.path_nice import PathInput, PathNiceBase, require_real_fs
from pathnice.core.utils.concurrency import gather_settled

logger = logging.getLogger(__name__)


class PathNiceArrBase(tuple):
    """
    Tuple of path values sharing one filesystem.

    ``base`` is the directory a listing was taken from (set by ``ls``). It is
    kept by slicing, concatenation, ``filter`` and ``reversed_``, and makes
    ``copy_to_dir``/``move_to_dir`` keep the layout relative to it.

    Example:
        >>> dirs, files = await path("/srv/app").ls(recursive=True)
        >>> await files.filter(lambda p: p.ext() == ".log").remove()
    """

    _path_cls: ClassVar[type[PathNiceBase]]

    def __new__(
        cls,
        items: Iterable[Any] = (),
        base: PathNiceBase | None = None,
        fs: FileSystem | None = None,
    ) -> PathNiceArrBase:
        fs = cls._path_cls.default_fs if fs is None else fs
        values = tuple(cls._path_cls._coerce(item, fs) for item in items)
        arr = super().__new__(cls, values)
        object.__setattr__(arr, "_fs", fs)
        object.__setattr__(arr, "base", None if base is None else cls._path_cls._coerce(base, fs))
        return arr

    @classmethod
    def _from(cls, items: Iterable[Any]) -> PathNiceArrBase:
        if isinstance(items, cls):
            return items
        return cls(items)

    def _derive(self, items: Iterable[Any]) -> PathNiceArrBase:
        return type(self)(items, base=self.base, fs=self._fs)

    @property
    def fs(self) -> FileSystem:
        return self._fs

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._derive(super().__getitem__(index))
        return super().__getitem__(index)

    def __add__(self, other: Any) -> PathNiceArrBase:
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return self._derive((*self, *other))

    def __repr__(self) -> str:
        items = ", ".join(repr(p.raw) for p in self)
        if self.base is None:
            return f"{type(self).__name__}([{items}])"
        return f"{type(self).__name__}([{items}], base={self.base.raw!r})"

    def raws(self) -> list[str]:
        return [p.raw for p in self]

    def filter(self, predicate: Callable[[PathNiceBase], bool]) -> PathNiceArrBase:
        return self._derive(p for p in self if predicate(p))

    def reversed_(self) -> PathNiceArrBase:
        return self._derive(reversed(self))

    # ==========================================================================
    # File system related methods
    # ==========================================================================

    def _dest_in(self, item: PathNiceBase, dest_dir: str) -> str:
        if self.base is not None:
            return item.to_relative(self.base).to_absolute(dest_dir).raw
        return item.lowpath.join(dest_dir, item.filename())

    async def copy_to_dir(
        self, dest_dir: PathInput, options: CopyOptions | None = None
    ) -> PathNiceArrBase:
        """Copy every entry into ``dest_dir`` concurrently; returns the destinations.

        All copies finish before the first failure, if any, is raised.
        """
        dest_raw = self._path_cls._coerce(dest_dir, self._fs).raw
        logger.debug(f"Copying {len(self)} entries to {dest_raw}")
        results = await gather_settled(p.copy(self._dest_in(p, dest_raw), options) for p in self)
        return type(self)(results, fs=self._fs)

    async def move_to_dir(
        self, dest_dir: PathInput, options: MoveOptions | None = None
    ) -> PathNiceArrBase:
        """Move every entry into ``dest_dir`` concurrently; returns the destinations."""
        dest_raw = self._path_cls._coerce(dest_dir, self._fs).raw
        logger.debug(f"Moving {len(self)} entries to {dest_raw}")
        results = await gather_settled(p.move(self._dest_in(p, dest_raw), options) for p in self)
        return type(self)(results, fs=self._fs)

    async def remove(self) -> PathNiceArrBase:
        """Remove every entry concurrently, failing after all removals have finished."""
        await gather_settled(p.remove() for p in self)
        return self

    async def delete(self) -> PathNiceArrBase:
        """Alias of remove."""
        return await self.remove()

    def watch(
        self, *, force_even_different_fs: bool = False, **kwargs: Any
    ) -> AsyncGenerator[set[tuple[Change, str]], None]:
        """Watch every entry with one ``watchfiles.awatch`` generator (see PathNice.watch)."""
        require_real_fs("watch", self._fs, force_even_different_fs)
        return awatch(*self.raws(), **kwargs)
