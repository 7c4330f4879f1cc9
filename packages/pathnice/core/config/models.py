"""Configuration models for path-nice."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit structured JSON log lines")


class DefaultsConfig(BaseModel):
    """Defaults applied by text and JSON helpers when a call does not override them."""

    encoding: str = Field(default="utf-8", description="Text encoding for read/write helpers")
    json_indent: int = Field(default=4, ge=0, description="Indentation of written JSON")
    json_eol: str = Field(default="\n", description="Line terminator of written JSON")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value


class AppConfig(BaseModel):
    """Library-wide configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
