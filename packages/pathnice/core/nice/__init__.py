"""Chainable path values and path sets.

Example:
    >>> from pathnice.core.nice import gen_path_nice
    >>> PathNice, PathNiceArr = gen_path_nice(lowpath.posix, FakeFileSystem())
    >>> PathNice("/srv").join("app").raw
    '/srv/app'
"""

from .generate import flavor_suffix, gen_path_nice
from .models import FileOwner, FileSize
from .parsed import ParsedPathNice
from .path_nice import PathInput, PathNiceBase, describe_binding, extract_raw
from .path_nice_arr import PathNiceArrBase

__all__ = [
    # Base classes
    "PathNiceBase",
    "PathNiceArrBase",
    "ParsedPathNice",
    "PathInput",
    # Models
    "FileSize",
    "FileOwner",
    # Generation
    "gen_path_nice",
    "flavor_suffix",
    # Utilities
    "extract_raw",
    "describe_binding",
]
