"""Result models returned by path value methods."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_KIB = 2**10


class FileSize(BaseModel):
    """Size of a file in binary units.

    Attributes:
        B: Size in bytes
        KB: Size in KiB
        MB: Size in MiB
        GB: Size in GiB
        TB: Size in TiB
        PB: Size in PiB
    """

    model_config = ConfigDict(frozen=True)

    B: int = Field(ge=0)
    KB: float = Field(ge=0.0)
    MB: float = Field(ge=0.0)
    GB: float = Field(ge=0.0)
    TB: float = Field(ge=0.0)
    PB: float = Field(ge=0.0)

    @classmethod
    def from_bytes(cls, size: int) -> FileSize:
        return cls(
            B=size,
            KB=size / _KIB,
            MB=size / _KIB**2,
            GB=size / _KIB**3,
            TB=size / _KIB**4,
            PB=size / _KIB**5,
        )


class FileOwner(BaseModel):
    """Owner of a file."""

    model_config = ConfigDict(frozen=True)

    uid: int
    gid: int
