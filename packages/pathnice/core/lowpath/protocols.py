"""Protocols for path implementations.

A path implementation is a set of pure string algorithms and constants for
one platform flavor. Python ships two of them (``posixpath`` and ``ntpath``);
``StdlibPlatformPath`` adapts either one to this protocol.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .models import ParsedPath

# Public functions and constants of Python's platform path modules that are
# forwarded unchanged. Names missing from the running interpreter are skipped.
STDLIB_PATH_API: tuple[str, ...] = (
    # pure string operations
    "abspath",
    "basename",
    "commonpath",
    "commonprefix",
    "dirname",
    "expanduser",
    "expandvars",
    "isabs",
    "join",
    "normcase",
    "normpath",
    "relpath",
    "split",
    "splitdrive",
    "splitext",
    "splitroot",
    # queries that touch the local filesystem
    "exists",
    "lexists",
    "getatime",
    "getctime",
    "getmtime",
    "getsize",
    "isdir",
    "isfile",
    "islink",
    "ismount",
    "realpath",
    "samefile",
    "sameopenfile",
    "samestat",
    # constants
    "altsep",
    "curdir",
    "defpath",
    "devnull",
    "extsep",
    "pardir",
    "pathsep",
    "sep",
    "supports_unicode_filenames",
)

# Operations every path implementation adds on top of the stdlib names.
EXTENDED_PATH_API: tuple[str, ...] = (
    "resolve",
    "normalize",
    "relative",
    "extname",
    "parse",
    "format",
    "is_absolute",
    "to_namespaced_path",
    "delimiter",
)

PLATFORM_PATH_API: tuple[str, ...] = STDLIB_PATH_API + EXTENDED_PATH_API


class PlatformPath(Protocol):
    """
    Protocol for a platform path implementation.

    All operations are synchronous and pure. Implementations are compared by
    identity, never by value.
    """

    name: str
    sep: str
    curdir: str
    delimiter: str

    join: Callable[..., str]
    dirname: Callable[[str], str]
    basename: Callable[[str], str]
    splitext: Callable[[str], tuple[str, str]]
    normpath: Callable[[str], str]
    isabs: Callable[[str], bool]

    def resolve(self, *paths: str) -> str:
        """Resolve a sequence of segments into an absolute path."""
        ...

    def normalize(self, path: str) -> str:
        """Normalize a path, reducing '..' and '.' parts."""
        ...

    def relative(self, from_path: str, to_path: str) -> str:
        """Relative path from ``from_path`` to ``to_path``."""
        ...

    def extname(self, path: str) -> str:
        """Extension of the last segment, including the dot."""
        ...

    def parse(self, path: str) -> ParsedPath:
        """Split a path into root, dir, base, ext and name."""
        ...

    def format(self, parsed: ParsedPath | Mapping[str, Any]) -> str:
        """Inverse of parse."""
        ...

    def is_absolute(self, path: str) -> bool:
        """Whether the path is absolute."""
        ...

    def to_namespaced_path(self, path: str) -> str:
        """Equivalent namespace-prefixed path (Windows only, identity elsewhere)."""
        ...

    @property
    def posix(self) -> "PlatformPath":
        """POSIX flavored sibling implementation."""
        ...

    @property
    def win32(self) -> "PlatformPath":
        """Windows flavored sibling implementation."""
        ...
