"""Models for the filesystem abstraction layer."""

from pydantic import BaseModel, Field


class WriteResult(BaseModel):
    """Result of a filesystem write operation.

    Attributes:
        path: Path written
        bytes_written: Number of bytes written
        duration_ms: Operation duration in milliseconds
    """

    path: str = Field(description="Path written")
    bytes_written: int = Field(description="Number of bytes written", ge=0)
    duration_ms: float = Field(description="Operation duration in milliseconds", ge=0.0)
