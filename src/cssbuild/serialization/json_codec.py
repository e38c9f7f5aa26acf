"""JSON helpers: compact serialisation and constructor-free deserialisation."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from cssbuild.errors import DeserializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Matches the byte-for-byte output of a browser's JSON.stringify.
_COMPACT_SEPARATORS = (",", ":")


def _own_attributes(value: Any) -> dict[str, Any]:
    """Return the instance attributes of *value* in insertion order.

    Derived properties live on the class and are not included.
    """
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    if is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any, *, indent: int | None = None) -> str:
    """Serialise *value* to JSON text.

    Mappings keep their key order, sequences become arrays and objects are
    encoded as their own attributes. Output is compact unless *indent* is set.
    """
    separators = None if indent is not None else _COMPACT_SEPARATORS
    return json.dumps(
        value,
        default=_own_attributes,
        ensure_ascii=False,
        indent=indent,
        separators=separators,
    )


def deserialize(cls: type[T], text: str) -> T:
    """Parse *text* and cast the result to *cls* without calling its constructor.

    Fields are copied as-is from the parsed object, so validation in
    ``__init__`` or ``__post_init__`` is skipped. Frozen dataclasses are
    supported.

    Raises ``json.JSONDecodeError`` for malformed text and
    :class:`DeserializationError` when the payload is not a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Cannot cast JSON {type(data).__name__} to {cls.__name__}: expected an object",
            target=cls,
        )
    instance = cls.__new__(cls)
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    logger.debug("Cast %d field(s) onto %s", len(data), cls.__name__)
    return instance
