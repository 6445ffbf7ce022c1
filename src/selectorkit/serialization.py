"""JSON round-trip helpers for plain data and simple objects."""

from __future__ import annotations

import dataclasses
import json
import logging
from types import ModuleType
from typing import Any, TypeVar

from selectorkit.config import DEFAULT_JSON_CONFIG, JsonConfig

__all__ = ["SerializationError", "to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerializationError(ValueError):
    """Raised when a value cannot be encoded or decoded."""


def _encode_object(obj: Any) -> Any:
    """Fallback encoder: expose a record-like object's own fields.

    Classes, functions and other callables, and modules are not records.
    """
    if isinstance(obj, (type, ModuleType)) or callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if hasattr(obj, "__dict__"):
        return vars(obj)
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, config: JsonConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Mappings, sequences and scalars encode as usual. Other objects encode as
    their own instance fields; computed properties are not included.

        >>> to_json([1, 2, 3])
        '[1,2,3]'
        >>> to_json({"width": 10, "height": 20})
        '{"height":20,"width":10}'
    """
    cfg = config or DEFAULT_JSON_CONFIG
    try:
        return json.dumps(
            obj,
            default=_encode_object,
            sort_keys=cfg.sort_keys,
            indent=cfg.indent,
            separators=cfg.separators,
            ensure_ascii=cfg.ensure_ascii,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode value: {exc}") from exc


def from_json(proto: type[T] | T, text: str) -> T:
    """Build an object of *proto*'s type from a JSON object.

    *proto* may be a class or an existing instance whose class is used. The
    new object is created without calling ``__init__``; each decoded key is
    set as an attribute, in the order the keys appear in *text*. Methods and
    properties of the class are available on the result.

    Types whose instances carry no ``__dict__`` (``dict``, slotted classes)
    are built by calling ``cls(**data)`` instead.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Invalid JSON at line %d column %d", exc.lineno, exc.colno)
        raise SerializationError(f"Invalid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    cls = proto if isinstance(proto, type) else type(proto)
    instance = cls.__new__(cls)
    if not hasattr(instance, "__dict__"):
        try:
            return cls(**data)
        except TypeError as exc:
            raise SerializationError(
                f"Cannot build {cls.__name__} from fields {list(data)}"
            ) from exc
    for key, value in data.items():
        try:
            setattr(instance, key, value)
        except AttributeError as exc:
            raise SerializationError(
                f"Cannot assign field {key!r} on {cls.__name__}"
            ) from exc
    return instance
