"""Parsed form of a path value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pathnice.core.lowpath import ParsedPath

if TYPE_CHECKING:
    from pathnice.core.nice.path_nice import PathNiceBase


class ParsedPathNice:
    """
    Immutable view of a parsed path that formats back into a path value.

    ``replace`` keeps the parts consistent: changing ``name`` or ``ext``
    rebuilds ``base``, and changing ``base`` re-splits ``name`` and ``ext``.

    Example:
        >>> parsed = path("/home/fuu/notes.txt").parse()
        >>> parsed.replace(ext=".md").format().raw
        '/home/fuu/notes.md'
    """

    __slots__ = ("_parsed", "_origin")

    def __init__(self, parsed: ParsedPath, origin: PathNiceBase) -> None:
        object.__setattr__(self, "_parsed", parsed)
        object.__setattr__(self, "_origin", origin)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def raw(self) -> ParsedPath:
        return self._parsed

    @property
    def root(self) -> str:
        return self._parsed.root

    @property
    def dir(self) -> str:
        return self._parsed.dir

    @property
    def base(self) -> str:
        return self._parsed.base

    @property
    def ext(self) -> str:
        return self._parsed.ext

    @property
    def name(self) -> str:
        return self._parsed.name

    def replace(self, **changes: str) -> ParsedPathNice:
        """Copy with some parts replaced (root, dir, base, ext, name)."""
        unknown = set(changes) - set(ParsedPath.model_fields)
        if unknown:
            raise TypeError(f"Unknown path parts: {', '.join(sorted(unknown))}")

        if "base" in changes and not {"name", "ext"} & set(changes):
            name, ext = self._origin.lowpath.splitext(changes["base"])
            changes = {**changes, "name": name, "ext": ext}
        elif {"name", "ext"} & set(changes) and "base" not in changes:
            name = changes.get("name", self._parsed.name)
            ext = changes.get("ext", self._parsed.ext)
            changes = {**changes, "base": f"{name}{ext}"}

        return ParsedPathNice(self._parsed.model_copy(update=changes), self._origin)

    def format(self) -> PathNiceBase:
        """Join the parts back into a path value bound like the original."""
        return self._origin._new(self._origin.lowpath.format(self._parsed))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedPathNice):
            return NotImplemented
        return self._parsed == other._parsed

    def __hash__(self) -> int:
        return hash(self._parsed)

    def __repr__(self) -> str:
        p = self._parsed
        return (
            f"ParsedPathNice(root={p.root!r}, dir={p.dir!r}, base={p.base!r}, "
            f"ext={p.ext!r}, name={p.name!r})"
        )
