"""JSON helpers: encode values to canonical text and rebuild typed objects."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from csskit.serialization.errors import ParseError

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def _encode_object(value: Any) -> Any:
    """Fallback encoder for dataclass instances and plain objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, sort_keys: bool = True, indent: int | None = None) -> str:
    """Return the JSON representation of *value*.

    Keys are sorted by default and the output is compact unless *indent* is
    given, e.g. ``[1, 2, 3]`` -> ``'[1,2,3]'``.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(
        value,
        sort_keys=sort_keys,
        indent=indent,
        separators=separators,
        default=_encode_object,
    )


def from_json(cls: type[T], text: str) -> T:
    """Create an instance of *cls* from the JSON object in *text*.

    ``cls.__init__`` is not called; every parsed key is copied onto the new
    instance as an attribute.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}",
            pos=exc.pos,
            line=exc.lineno,
            column=exc.colno,
        ) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}",
            pos=0,
            line=1,
            column=1,
        )

    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    return obj
