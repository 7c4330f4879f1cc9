"""Path implementations backed by Python's ``posixpath`` and ``ntpath``.

Every stdlib function and constant listed in ``STDLIB_PATH_API`` is exposed
as the very same object the stdlib module holds, so results are identical to
calling the stdlib directly. The extended operations are compositions of
those same functions.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from .models import ParsedPath
from .protocols import STDLIB_PATH_API


class StdlibPlatformPath:
    """
    Path implementation wrapping one of Python's platform path modules.

    Instances are process-wide singletons (``POSIX``, ``WIN32``); two
    implementations are the same implementation only if they are the same
    object.
    """

    def __init__(self, module: ModuleType, name: str) -> None:
        self.module = module
        self.name = name
        for attr in STDLIB_PATH_API:
            if hasattr(module, attr):
                setattr(self, attr, getattr(module, attr))
        self.delimiter: str = module.pathsep
        self.normalize = module.normpath
        self.is_absolute = module.isabs

    def __repr__(self) -> str:
        return f"<StdlibPlatformPath {self.name} ({self.module.__name__})>"

    @property
    def posix(self) -> StdlibPlatformPath:
        return POSIX

    @property
    def win32(self) -> StdlibPlatformPath:
        return WIN32

    def _seps(self) -> str:
        return self.module.sep + (self.module.altsep or "")

    def _strip_trailing_seps(self, path: str) -> str:
        drive, rest = self.module.splitdrive(path)
        stripped = rest.rstrip(self._seps())
        if not stripped and rest:
            # the path is (drive +) root only
            return drive + rest[0]
        return drive + stripped

    def _root(self, path: str) -> str:
        drive, rest = self.module.splitdrive(path)
        if rest[:1] and rest[0] in self._seps():
            return drive + rest[0]
        return drive

    def resolve(self, *paths: str) -> str:
        if not paths:
            return self.module.abspath(self.module.curdir)
        return self.module.abspath(self.module.join(*paths))

    def relative(self, from_path: str, to_path: str) -> str:
        return self.module.relpath(to_path, from_path or self.module.curdir)

    def extname(self, path: str) -> str:
        base = self.module.basename(self._strip_trailing_seps(path))
        return self.module.splitext(base)[1]

    def parse(self, path: str) -> ParsedPath:
        if not path:
            return ParsedPath()
        root = self._root(path)
        stripped = self._strip_trailing_seps(path)
        base = self.module.basename(stripped)
        ext = self.module.splitext(base)[1]
        directory = self.module.dirname(stripped)
        return ParsedPath(
            root=root,
            dir=directory,
            base=base,
            ext=ext,
            name=base[: len(base) - len(ext)],
        )

    def format(self, parsed: ParsedPath | Mapping[str, Any]) -> str:
        if not isinstance(parsed, ParsedPath):
            parsed = ParsedPath.model_validate(dict(parsed))
        directory = parsed.dir or parsed.root
        base = parsed.base or f"{parsed.name}{parsed.ext}"
        if not directory:
            return base
        if directory == parsed.root or directory.endswith(self.module.sep):
            return f"{directory}{base}"
        return f"{directory}{self.module.sep}{base}"

    def to_namespaced_path(self, path: str) -> str:
        if self.module is not ntpath or not path:
            return path
        resolved = self.resolve(path)
        if len(resolved) <= 2:
            return path
        if resolved.startswith("\\\\"):
            if resolved[2] not in "?.":
                return "\\\\?\\UNC\\" + resolved[2:]
        elif resolved[1] == ":" and resolved[2] == "\\":
            return "\\\\?\\" + resolved
        return path


POSIX = StdlibPlatformPath(posixpath, "posix")
WIN32 = StdlibPlatformPath(ntpath, "win32")

# Same object as the flavor of the running OS, like os.path.
NATIVE = WIN32 if os.name == "nt" else POSIX


def sibling(lowpath: Any, flavor: str) -> Any:
    """Return the ``flavor`` ('posix' or 'win32') sibling of a path implementation.

    Implementations that do not carry siblings fall back to the stdlib ones.
    """
    found = getattr(lowpath, flavor, None)
    if found is not None:
        return found
    return POSIX if flavor == "posix" else WIN32
