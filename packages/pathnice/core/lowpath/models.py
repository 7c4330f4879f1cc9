"""Models for the path implementation layer."""

from pydantic import BaseModel, ConfigDict, Field


class ParsedPath(BaseModel):
    """Components of a path string.

    Mirrors the classic ``{root, dir, base, ext, name}`` decomposition:

        >>> ParsedPath(root="/", dir="/home/fuu", base="data.json", ext=".json", name="data")

    ``base`` is ``name + ext``; ``dir`` includes ``root``.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(default="", description="Root of the path ('/', 'C:\\\\', or '')")
    dir: str = Field(default="", description="Directory part, including the root")
    base: str = Field(default="", description="Last path segment, including extension")
    ext: str = Field(default="", description="Extension of base, including the dot")
    name: str = Field(default="", description="Last path segment without extension")
