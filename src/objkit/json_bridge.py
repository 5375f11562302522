"""JSON bridge: serialise objects to JSON text and rebuild typed objects from it."""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any, TypeVar

from objkit.config import DEFAULT_SERIALIZER_CONFIG, SerializerConfig

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _finite_or_none(value: Any) -> Any:
    """Replace NaN and infinities with ``None``, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_or_none(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_none(v) for v in value]
    return value


def _encode_object(value: Any) -> Any:
    """``json.dumps`` fallback: encode objects by their data fields."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite_or_none(dataclasses.asdict(value))
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return _finite_or_none(
            {k: v for k, v in vars(value).items() if not k.startswith("_")}
        )
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def serialize(value: Any, config: SerializerConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Lists, dicts and primitives use the standard encoding; other objects are
    encoded by their public instance attributes. Non-finite floats are written
    as ``null``::

        serialize([1, 2, 3])            # '[1,2,3]'
        serialize(Rectangle(10, 20))    # '{"width":10,"height":20}'
        serialize([float("nan")])       # '[null]'
    """
    cfg = config or DEFAULT_SERIALIZER_CONFIG
    return json.dumps(
        _finite_or_none(value),
        default=_encode_object,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
        ensure_ascii=cfg.ensure_ascii,
        separators=cfg.separators,
        allow_nan=False,
    )


def _as_fields(data: Any) -> dict[str, Any]:
    """Spread a parsed JSON value into a field dictionary.

    Objects are used as is; arrays and strings become index-keyed fields;
    numbers, booleans and null carry no fields.
    """
    if isinstance(data, dict):
        return data
    if isinstance(data, (list, str)):
        return {str(i): item for i, item in enumerate(data)}
    return {}


def deserialize(capabilities: type[T], text: str) -> T:
    """Parse *text* and return an instance of *capabilities* holding its fields.

    The parsed object becomes the instance dictionary as is: class attributes
    are not copied and ``__init__`` is not called, so attribute lookups that
    miss the data fall through to the class.

    Raises ``json.JSONDecodeError`` for malformed text and ``ValueError`` for
    the non-standard constants ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    data = _as_fields(json.loads(text, parse_constant=_reject_constant))
    logger.debug("Deserialising %d field(s) into %s", len(data), capabilities.__name__)
    obj = capabilities.__new__(capabilities)
    vars(obj).update(data)
    return obj
