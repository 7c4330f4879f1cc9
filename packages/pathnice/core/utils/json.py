"""JSON utilities for reading and writing documents through path values."""

from __future__ import annotations

import json
import os
from typing import Any

from pydantic import BaseModel

from pathnice.core.config.models import DefaultsConfig
from pathnice.core.fs.models import JsonWriteOptions


def _json_default(obj: Any) -> Any:
    """JSON serializer for types not supported by default.

    Handles:
    - pydantic models -> dict
    - os.PathLike (including path values) -> str
    - sets and tuples -> list
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, os.PathLike):
        return os.fspath(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data: Any, options: JsonWriteOptions, defaults: DefaultsConfig) -> str:
    """Serialize ``data`` with the layout from ``options``, falling back to ``defaults``.

    Example:
        >>> to_json({"a": 1}, JsonWriteOptions(indent=2), DefaultsConfig())
        '{\\n  "a": 1\\n}'
    """
    indent = defaults.json_indent if options.indent is None else options.indent
    eol = defaults.json_eol if options.eol is None else options.eol

    text = json.dumps(
        data,
        indent=indent,
        ensure_ascii=options.ensure_ascii,
        sort_keys=options.sort_keys,
        default=_json_default,
    )
    if eol != "\n":
        text = text.replace("\n", eol)
    return text


def from_json(text: str) -> Any:
    """Parse a JSON document."""
    return json.loads(text)
