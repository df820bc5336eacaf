"""
JSON-like value model used wherever parameters and results cross the
untyped call boundary.

Values are plain Python containers. ``to_dynamic`` validates a value
against the model and returns a structural copy, so nothing handed in by a
caller is ever aliased by the registry or a tool.
"""

from __future__ import annotations

import math
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Mapping, TypeAlias, Union

__all__ = [
    "DynamicValue",
    "DynamicObject",
    "ValueKind",
    "kind_of",
    "to_dynamic",
    "to_dynamic_object",
    "empty_object",
    "freeze",
]

DynamicValue: TypeAlias = Union[
    str, int, float, bool, None, list["DynamicValue"], dict[str, "DynamicValue"]
]
DynamicObject: TypeAlias = dict[str, DynamicValue]


class ValueKind(StrEnum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOL = "bool"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


def kind_of(value: Any) -> ValueKind:
    """Classify *value* or raise TypeError if it is outside the value model."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def to_dynamic(value: Any) -> DynamicValue:
    """
    Return a deep structural copy of *value* in the dynamic value model.

    Raises:
        TypeError: for unsupported leaf types or non-string object keys.
        ValueError: for NaN/infinite floats or self-referencing containers.
    """
    return _copy(value, path="$", active=set())


def to_dynamic_object(value: Any) -> DynamicObject:
    """Like :func:`to_dynamic` but the top level must be an object."""
    if kind_of(value) is not ValueKind.OBJECT:
        raise TypeError(f"Expected an object, got {type(value).__name__}")
    return _copy(value, path="$", active=set())


def empty_object() -> DynamicObject:
    return {}


def freeze(value: Any) -> Any:
    """
    Validate *value* like :func:`to_dynamic` and return a read-only copy.

    Objects become ``MappingProxyType`` views and arrays become tuples, all
    the way down. ``to_dynamic`` turns a frozen value back into plain
    containers.
    """
    return _freeze(to_dynamic(value))


def _freeze(value: DynamicValue) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _copy(value: Any, *, path: str, active: set[int]) -> DynamicValue:
    try:
        kind = kind_of(value)
    except TypeError as exc:
        raise TypeError(f"{exc} at {path}") from None

    match kind:
        case ValueKind.NULL | ValueKind.BOOL | ValueKind.STRING:
            return value
        case ValueKind.INTEGER:
            return int(value)
        case ValueKind.NUMBER:
            if not math.isfinite(value):
                raise ValueError(f"Non-finite number at {path}")
            return float(value)

    marker = id(value)
    if marker in active:
        raise ValueError(f"Cycle detected at {path}")
    active.add(marker)
    try:
        if kind is ValueKind.ARRAY:
            return [
                _copy(item, path=f"{path}[{i}]", active=active)
                for i, item in enumerate(value)
            ]
        copied: DynamicObject = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Object keys must be strings, got {type(key).__name__} at {path}"
                )
            copied[key] = _copy(item, path=f"{path}.{key}", active=active)
        return copied
    finally:
        active.discard(marker)
