"""Path module factory and cache."""

from pathnice.core.factory.cache import cache_info, get_path_module
from pathnice.core.factory.module import PathModule, build_path_module

__all__ = [
    "PathModule",
    "build_path_module",
    "get_path_module",
    "cache_info",
]
