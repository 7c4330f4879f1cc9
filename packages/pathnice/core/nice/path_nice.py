"""Chainable, immutable path values.

A path value pairs a raw path string with the filesystem it operates on.
Concrete classes are generated per (path implementation, filesystem) pair by
``gen_path_nice``; obtain them from a path module rather than subclassing
``PathNiceBase`` directly:

    >>> from pathnice.core import path
    >>> p = path("/srv/app").join("config", "settings.json")
    >>> p.ext(".yaml").raw
    '/srv/app/config/settings.yaml'
    >>> await p.output_json({"debug": True})
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
import re
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import TYPE_CHECKING, Any, ClassVar

import aiofiles
from watchfiles import Change, awatch

from pathnice.core import fs as helpers
from pathnice.core.config import load_app_config
from pathnice.core.config.models import DefaultsConfig
from pathnice.core.errors import (
    IncompatiblePathError,
    PathArgumentError,
    PathConflictError,
    UnsupportedFileSystemError,
)
from pathnice.core.fs.models import (
    CopyOptions,
    EnsureDirOptions,
    EnsureFileOptions,
    JsonWriteOptions,
    MoveOptions,
    WriteFileOptions,
)
from pathnice.core.io import (
    FileSystem,
    RealFileSystem,
    WriteResult,
    is_dir,
    is_file,
    is_symlink,
)
from pathnice.core.lowpath import PlatformPath
from pathnice.core.nice.models import FileOwner, FileSize
from pathnice.core.nice.parsed import ParsedPathNice
from pathnice.core.utils.json import from_json, to_json

if TYPE_CHECKING:
    from pathnice.core.nice.path_nice_arr import PathNiceArrBase

logger = logging.getLogger(__name__)

PathInput = str | os.PathLike[str]

_SEPARATORS = re.compile(r"[/\\]")


def describe_binding(lowpath: Any, fs: Any) -> str:
    """Short human-readable name of a (path implementation, filesystem) pair."""
    flavor = getattr(lowpath, "name", type(lowpath).__name__)
    return f"{flavor} path on {type(fs).__name__} at {id(fs):#x}"


def extract_raw(lowpath: Any, fs: Any, value: Any) -> str:
    """
    Raw string of ``value`` for use with the given binding.

    Strings and ``os.PathLike`` objects are accepted as-is. Path values must
    share the identical path implementation and filesystem objects.

    Raises:
        IncompatiblePathError: If ``value`` is a path value with another binding
        PathArgumentError: If ``value`` is not path-like
    """
    if isinstance(value, str):
        return value
    if isinstance(value, PathNiceBase):
        if value.lowpath is not lowpath or value.fs is not fs:
            raise IncompatiblePathError(
                describe_binding(lowpath, fs), describe_binding(value.lowpath, value.fs)
            )
        return value.raw
    if isinstance(value, os.PathLike):
        raw = os.fspath(value)
        if isinstance(raw, str):
            return raw
    raise PathArgumentError(f"{value!r} is not a string, an os.PathLike or a PathNice object.")


def require_real_fs(operation: str, fs: FileSystem, force: bool) -> None:
    """Refuse ``operation`` unless ``fs`` is a RealFileSystem or ``force`` is set."""
    if not force and not isinstance(fs, RealFileSystem):
        raise UnsupportedFileSystemError(operation, fs)


async def _defaults() -> DefaultsConfig:
    # The first load may read PATHNICE_CONFIG from disk
    config = await asyncio.to_thread(load_app_config)
    return config.defaults


async def _resolve_result(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class PathNiceBase:
    """
    Immutable path value bound to a path implementation and a filesystem.

    Path methods are synchronous and pure; they return new values sharing
    the filesystem. Filesystem methods are coroutines.

    Attributes:
        lowpath: Path implementation shared by every value of the class
        default_fs: Filesystem used when none is passed to the constructor
    """

    __slots__ = ("_raw", "_fs")

    lowpath: ClassVar[PlatformPath]
    default_fs: ClassVar[FileSystem]
    _arr_cls: ClassVar[type[PathNiceArrBase]]

    def __init__(self, raw: str, fs: FileSystem | None = None) -> None:
        if not isinstance(raw, str):
            raise PathArgumentError(f"{raw!r} is not a string.")
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_fs", self.default_fs if fs is None else fs)

    @classmethod
    def _coerce(cls, value: Any, fs: FileSystem | None = None) -> PathNiceBase:
        """Convert ``value`` to a value of this class on ``fs`` (default filesystem if None)."""
        fs = cls.default_fs if fs is None else fs
        if isinstance(value, cls) and value._fs is fs:
            return value
        return cls(extract_raw(cls.lowpath, fs, value), fs)

    def _new(self, raw: str) -> PathNiceBase:
        return type(self)(raw, self._fs)

    def _extract(self, value: Any) -> str:
        return extract_raw(self.lowpath, self._fs, value)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def fs(self) -> FileSystem:
        return self._fs

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __fspath__(self) -> str:
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathNiceBase):
            return NotImplemented
        return (
            self._raw == other._raw
            and self.lowpath is other.lowpath
            and self._fs is other._fs
        )

    def __hash__(self) -> int:
        return hash((self._raw, id(self.lowpath), id(self._fs)))

    def __truediv__(self, other: Any) -> PathNiceBase:
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: Any) -> PathNiceBase:
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self._new(self.lowpath.join(self._extract(other), self._raw))

    # ==========================================================================
    # Path related methods
    # ==========================================================================

    def join(self, *parts: PathInput) -> PathNiceBase:
        """Join segments onto this path."""
        raws = [self._extract(p) for p in parts]
        return self._new(self.lowpath.join(self._raw, *raws))

    def dirname(
        self, new: PathInput | Callable[[str], PathInput] | None = None
    ) -> PathNiceBase:
        """
        Directory part of the path, or a copy moved into another directory.

        Args:
            new: None to read the directory name; a path to replace it; a
                callable mapping the current directory name to the new one

        Example:
            >>> path("/a/b/c.txt").dirname("/x").raw
            '/x/c.txt'
        """
        if new is None:
            return self._new(self.lowpath.dirname(self._raw))
        if isinstance(new, (str, os.PathLike)):
            return self._new(self.lowpath.join(self._extract(new), self.lowpath.basename(self._raw)))
        if callable(new):
            return self.dirname(new(self.lowpath.dirname(self._raw)))
        raise PathArgumentError(f".dirname(): unsupported argument {new!r}")

    @property
    def parent(self) -> PathNiceBase:
        return self._new(self.lowpath.dirname(self._raw))

    def filename(self, new: str | Callable[[str], str] | None = None) -> str | PathNiceBase:
        """
        Last segment of the resolved path, or a copy with it replaced.

        Returns a string when reading and a path value when replacing.
        """
        if new is None:
            return self.lowpath.basename(self.lowpath.resolve(self._raw))
        if isinstance(new, str):
            return self._new(self.lowpath.join(self.lowpath.dirname(self._raw), new))
        if callable(new):
            return self.filename(new(self.filename()))
        raise PathArgumentError(f".filename(): unsupported argument {new!r}")

    def ext(self, new: str | Callable[[str], str] | None = None) -> str | PathNiceBase:
        """
        Extension (with the dot), or a copy with the extension replaced.

        Example:
            >>> path("notes.txt").ext()
            '.txt'
            >>> path("notes.txt").ext(".md").raw
            'notes.md'
        """
        if new is None:
            return self.lowpath.extname(self._raw)
        if isinstance(new, str):
            return self._with_ext(new)
        if callable(new):
            return self.ext(new(self.ext()))
        raise PathArgumentError(f".ext(): unsupported argument {new!r}")

    def without_ext(self) -> PathNiceBase:
        """Copy with the extension removed."""
        return self._with_ext("")

    def _with_ext(self, ext: str) -> PathNiceBase:
        parsed = self.lowpath.parse(self._raw)
        return self._new(self.lowpath.format({"dir": parsed.dir, "name": parsed.name, "ext": ext}))

    def separator(self, force: str | None = None) -> str | PathNiceBase:
        """
        Separator used by the raw path, or a copy using ``force`` everywhere.

        Returns '/', '\\\\', 'hybrid' (both) or 'none' when reading.
        """
        if force is not None:
            return self._new(_SEPARATORS.sub(lambda _: force, self._raw))
        has_slash = "/" in self._raw
        has_backslash = "\\" in self._raw
        if has_slash and has_backslash:
            return "hybrid"
        if has_slash:
            return "/"
        if has_backslash:
            return "\\"
        return "none"

    def prefix_filename(self, prefix: str) -> PathNiceBase:
        parsed = self.lowpath.parse(self._raw)
        return self._new(self.lowpath.format({"dir": parsed.dir, "base": prefix + parsed.base}))

    def postfix_before_ext(self, postfix: str) -> PathNiceBase:
        parsed = self.lowpath.parse(self._raw)
        return self._new(
            self.lowpath.format(
                {"dir": parsed.dir, "name": parsed.name + postfix, "ext": parsed.ext}
            )
        )

    def postfix(self, postfix: str) -> PathNiceBase:
        parsed = self.lowpath.parse(self._raw)
        return self._new(
            self.lowpath.format(
                {"dir": parsed.dir, "name": parsed.name, "ext": parsed.ext + postfix}
            )
        )

    def is_absolute(self) -> bool:
        return self.lowpath.is_absolute(self._raw)

    def to_absolute(self, base: PathInput | None = None) -> PathNiceBase:
        """Absolute form of the path, resolved against ``base`` or the working directory."""
        if self.is_absolute():
            return self
        if base is None:
            return self._new(self.lowpath.resolve(self._raw))
        return self._new(self.lowpath.resolve(self._extract(base), self._raw))

    def to_relative(self, relative_to: PathInput | None = None) -> PathNiceBase:
        """Path relative to ``relative_to`` (the working directory by default)."""
        start = os.getcwd() if relative_to is None else self._extract(relative_to)
        return self._new(self.lowpath.relative(start, self._raw))

    def parse(self) -> ParsedPathNice:
        return ParsedPathNice(self.lowpath.parse(self._raw), self)

    # ==========================================================================
    # File system related methods
    # ==========================================================================

    async def realpath(self) -> PathNiceBase:
        return self._new(await self._fs.realpath(self._raw))

    async def read_file(self) -> bytes:
        return await self._fs.read_file(self._raw)

    async def read_file_to_string(self, encoding: str | None = None) -> str:
        """Read and decode the file (configured default encoding if None)."""
        data = await self._fs.read_file(self._raw)
        return data.decode(encoding or (await _defaults()).encoding)

    async def read_json(self, encoding: str | None = None) -> Any:
        return from_json(await self.read_file_to_string(encoding))

    async def _encode(self, data: bytes | str, options: WriteFileOptions) -> bytes:
        if isinstance(data, str):
            return data.encode(options.encoding or (await _defaults()).encoding)
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise PathArgumentError(f"Cannot write {type(data).__name__} to {self._raw}")

    async def write_file(
        self, data: bytes | str, options: WriteFileOptions | None = None
    ) -> WriteResult:
        """Write bytes or text, replacing the file. The parent must exist."""
        options = options or WriteFileOptions()
        data = await self._encode(data, options)
        return await self._fs.write_file(self._raw, data, mode=options.mode)

    async def append_file(
        self, data: bytes | str, options: WriteFileOptions | None = None
    ) -> WriteResult:
        options = options or WriteFileOptions()
        data = await self._encode(data, options)
        return await self._fs.write_file(self._raw, data, mode=options.mode, append=True)

    async def write_json(self, data: Any, options: JsonWriteOptions | None = None) -> WriteResult:
        """Serialize ``data`` as JSON and write it (indent and EOL from config by default)."""
        options = options or JsonWriteOptions()
        return await self.write_file(to_json(data, options, await _defaults()), options)

    async def output_file(
        self, data: bytes | str, options: WriteFileOptions | None = None
    ) -> WriteResult:
        """Like write_file, creating missing parent directories first."""
        await self.parent.ensure_dir()
        return await self.write_file(data, options)

    async def output_json(self, data: Any, options: JsonWriteOptions | None = None) -> WriteResult:
        """Like write_json, creating missing parent directories first."""
        await self.parent.ensure_dir()
        return await self.write_json(data, options)

    async def update_file_as_string(
        self,
        fn: Callable[[str], str | Awaitable[str]],
        options: WriteFileOptions | None = None,
    ) -> WriteResult:
        """Read the file as text, pass it through ``fn`` (sync or async) and write the result."""
        options = options or WriteFileOptions()
        text = await self.read_file_to_string(options.encoding)
        return await self.write_file(await _resolve_result(fn(text)), options)

    async def update_json(
        self,
        fn: Callable[[Any], Any],
        options: JsonWriteOptions | None = None,
    ) -> WriteResult:
        """
        Read the JSON document, pass it through ``fn`` and write it back.

        ``fn`` may mutate the document in place and return None.
        """
        options = options or JsonWriteOptions()
        document = await self.read_json(options.encoding)
        result = await _resolve_result(fn(document))
        return await self.write_json(document if result is None else result, options)

    def open(
        self, mode: str = "r", *, force_even_different_fs: bool = False, **kwargs: Any
    ) -> Any:
        """
        Open the file with aiofiles.

        The result is awaitable and an async context manager yielding the
        aiofiles handle. Extra keyword arguments go to ``aiofiles.open``.

        Raises:
            UnsupportedFileSystemError: If the value is not on a RealFileSystem
                and ``force_even_different_fs`` is not set

        Example:
            >>> async with path("app.log").open("a") as f:
            ...     await f.write("started\\n")
        """
        require_real_fs("open", self._fs, force_even_different_fs)
        return aiofiles.open(self._raw, mode, **kwargs)

    async def copy(self, dest: PathInput, options: CopyOptions | None = None) -> PathNiceBase:
        """Copy to ``dest`` and return the destination."""
        dest_raw = self._extract(dest)
        await helpers.copy(self.lowpath, self._fs, self._raw, dest_raw, options)
        return self._new(dest_raw)

    async def move(self, dest: PathInput, options: MoveOptions | None = None) -> PathNiceBase:
        """Move to ``dest`` and return the destination."""
        dest_raw = self._extract(dest)
        await helpers.move(self.lowpath, self._fs, self._raw, dest_raw, options)
        return self._new(dest_raw)

    async def rename(self, new_path: PathInput) -> PathNiceBase:
        new_raw = self._extract(new_path)
        await self._fs.rename(self._raw, new_raw)
        return self._new(new_raw)

    async def remove(self) -> PathNiceBase:
        """Remove the file or directory tree. A missing path is not an error."""
        await helpers.remove(self._fs, self._raw)
        return self

    async def delete(self) -> PathNiceBase:
        """Alias of remove."""
        return await self.remove()

    async def empty_dir(self) -> PathNiceBase:
        """Remove the directory contents, creating the directory if it is missing."""
        await helpers.empty_dir(self.lowpath, self._fs, self._raw)
        return self

    async def ensure_dir(self, options: EnsureDirOptions | None = None) -> PathNiceBase:
        await helpers.ensure_dir(self._fs, self._raw, options)
        return self

    async def ensure_file(self, options: EnsureFileOptions | None = None) -> PathNiceBase:
        await helpers.ensure_file(self.lowpath, self._fs, self._raw, options)
        return self

    async def _stat_or_none(self, follow_links: bool) -> os.stat_result | None:
        try:
            if follow_links:
                return await self._fs.stat(self._raw)
            return await self._fs.lstat(self._raw)
        except OSError as e:
            logger.debug(f"Stat of {self._raw} failed: {e}")
            return None

    async def exists(self) -> bool:
        return await self._stat_or_none(follow_links=True) is not None

    async def is_empty_dir(self, follow_links: bool = False) -> bool:
        """True for a directory without entries. A link only counts with ``follow_links``."""
        if not await self.is_dir(follow_links):
            return False
        try:
            names = await self._fs.listdir(self._raw)
        except OSError as e:
            logger.debug(f"Listing {self._raw} failed: {e}")
            return False
        return not names

    async def is_dir(self, follow_links: bool = False) -> bool:
        st = await self._stat_or_none(follow_links)
        return st is not None and is_dir(st)

    async def is_file(self, follow_links: bool = False) -> bool:
        st = await self._stat_or_none(follow_links)
        return st is not None and is_file(st)

    async def is_symbolic_link(self) -> bool:
        st = await self._stat_or_none(follow_links=False)
        return st is not None and is_symlink(st)

    async def readdir(self) -> list[str]:
        return await self._fs.listdir(self._raw)

    async def ls(
        self, recursive: bool = False, follow_links: bool = False
    ) -> tuple[PathNiceArrBase, PathNiceArrBase]:
        """
        List the directory as ``(dirs, files)``.

        Both sets carry the absolute form of this path as ``base``. The path
        itself is always resolved through symbolic links; entries are only
        followed when ``follow_links`` is set.

        Raises:
            PathConflictError: If the path is not a directory
        """
        if not is_dir(await self._fs.stat(self._raw)):
            raise PathConflictError("ls", self._raw, "is not a directory.")

        base = self.to_absolute()
        dirs: list[str] = []
        files: list[str] = []

        async def read_layer(directory: str) -> None:
            for name in await self._fs.listdir(directory):
                entry = self.lowpath.join(directory, name)
                st = await self._fs.lstat(entry)
                if follow_links and is_symlink(st):
                    st = await self._fs.lstat(await self._fs.realpath(entry))
                if is_dir(st):
                    dirs.append(entry)
                    if recursive:
                        await read_layer(entry)
                else:
                    files.append(entry)

        await read_layer(self.lowpath.normalize(base.raw))
        return (
            self._arr_cls(dirs, base=base, fs=self._fs),
            self._arr_cls(files, base=base, fs=self._fs),
        )

    def watch(
        self, *, force_even_different_fs: bool = False, **kwargs: Any
    ) -> AsyncGenerator[set[tuple[Change, str]], None]:
        """
        Watch the path for changes with watchfiles.

        Returns the ``watchfiles.awatch`` generator; keyword arguments such as
        ``stop_event``, ``recursive`` or ``debounce`` are passed through.

        Raises:
            UnsupportedFileSystemError: If the value is not on a RealFileSystem
                and ``force_even_different_fs`` is not set
        """
        require_real_fs("watch", self._fs, force_even_different_fs)
        return awatch(self._raw, **kwargs)

    async def stat(self) -> os.stat_result:
        return await self._fs.stat(self._raw)

    async def lstat(self) -> os.stat_result:
        return await self._fs.lstat(self._raw)

    async def file_mode(self) -> int:
        return (await self.stat()).st_mode

    async def file_owner(self) -> FileOwner:
        st = await self.stat()
        return FileOwner(uid=st.st_uid, gid=st.st_gid)

    async def file_size(self) -> FileSize:
        return FileSize.from_bytes((await self.stat()).st_size)

    async def chmod(self, mode: int) -> PathNiceBase:
        await self._fs.chmod(self._raw, mode)
        return self

    async def chown(self, uid: int, gid: int) -> PathNiceBase:
        await self._fs.chown(self._raw, uid, gid)
        return self

    async def lchown(self, uid: int, gid: int) -> PathNiceBase:
        await self._fs.lchown(self._raw, uid, gid)
        return self
