"""Platform path implementations for path-nice.

Example:
    >>> from pathnice.core.lowpath import posix, win32
    >>> posix.join("/home", "fuu")
    '/home/fuu'
    >>> win32.parse("C:\\\\Users\\\\fuu.txt").ext
    '.txt'
"""

from .impl_stdlib import NATIVE, POSIX, WIN32, StdlibPlatformPath, sibling
from .models import ParsedPath
from .protocols import EXTENDED_PATH_API, PLATFORM_PATH_API, STDLIB_PATH_API, PlatformPath

posix = POSIX
win32 = WIN32
native = NATIVE

__all__ = [
    # Protocols and API lists
    "PlatformPath",
    "PLATFORM_PATH_API",
    "STDLIB_PATH_API",
    "EXTENDED_PATH_API",
    # Models
    "ParsedPath",
    # Implementations
    "StdlibPlatformPath",
    "posix",
    "win32",
    "native",
    "sibling",
]
