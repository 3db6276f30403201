"""Evaluation – serialized feature values and conversion to caller types."""
from __future__ import annotations

import functools
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_json

__all__ = ["TRUE", "deserialize_value", "serialize_value", "type_default"]

TRUE = b"true"

_TYPE_DEFAULTS: dict[Any, Any] = {bool: False, int: 0, float: 0.0, str: ""}


@functools.lru_cache(maxsize=None)
def _adapter(value_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


def type_default(value_type: Any) -> Any:
    """``False``/``0``/``0.0``/``""`` for the scalar types, ``None`` otherwise."""
    return _TYPE_DEFAULTS.get(value_type)


def serialize_value(value: Any) -> bytes:
    return to_json(value)


def deserialize_value(raw: bytes, value_type: Any, *, strict: bool) -> Any:
    """Decode *raw* JSON into *value_type*; raises ``pydantic.ValidationError``."""
    return _adapter(value_type).validate_json(raw, strict=strict)
