"""Option models for filesystem helpers.

All option models are frozen; build a new one with ``model_copy(update=...)``.
"""

from collections.abc import Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field

CopyFilter = Callable[[str, str], bool | Awaitable[bool]]


class EnsureDirOptions(BaseModel):
    """Options for ensure_dir."""

    model_config = ConfigDict(frozen=True)

    mode: int | None = Field(default=None, description="Permission bits for created directories")


class EnsureFileOptions(BaseModel):
    """Options for ensure_file."""

    model_config = ConfigDict(frozen=True)

    file_mode: int | None = Field(default=None, description="Permission bits for the created file")
    dir_mode: int | None = Field(
        default=None, description="Permission bits for created parent directories"
    )


class WriteFileOptions(BaseModel):
    """Options for writing text or bytes to a file."""

    model_config = ConfigDict(frozen=True)

    encoding: str | None = Field(
        default=None, description="Text encoding (None uses the configured default)"
    )
    mode: int | None = Field(default=None, description="Permission bits when the file is created")


class JsonWriteOptions(WriteFileOptions):
    """Options for writing JSON documents."""

    indent: int | None = Field(
        default=None, ge=0, description="Indentation (None uses the configured default)"
    )
    eol: str | None = Field(
        default=None, description="Line terminator (None uses the configured default)"
    )
    ensure_ascii: bool = False
    sort_keys: bool = False


class CopyOptions(BaseModel):
    """
    Options for copy.

    Attributes:
        force: Overwrite existing files
        error_on_exist: Fail when a destination file exists and force is off
        recursive: Copy directories recursively
        dereference: Copy what symbolic links point to instead of the links
        preserve_timestamps: Keep access and modification times
        verbatim_symlinks: Do not resolve relative link targets
        filter: Predicate (src, dest) deciding whether an entry is copied
    """

    model_config = ConfigDict(frozen=True)

    force: bool = True
    error_on_exist: bool = False
    recursive: bool = True
    dereference: bool = False
    preserve_timestamps: bool = False
    verbatim_symlinks: bool = False
    filter: CopyFilter | None = None


class MoveOptions(BaseModel):
    """Options for move."""

    model_config = ConfigDict(frozen=True)

    overwrite: bool = False
