"""Selectorkit: CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import DEFAULT_JSON_CONFIG, JsonConfig
from selectorkit.selector import (
    Combinator,
    DuplicateFragmentError,
    FragmentKind,
    OutOfOrderError,
    SelectorBuilder,
    SelectorError,
)
from selectorkit.selector import facade as css_selector_builder
from selectorkit.serialization import SerializationError, from_json, to_json
from selectorkit.shapes import Rectangle

__all__ = [
    "__version__",
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "Combinator",
    "FragmentKind",
    "Rectangle",
    "to_json",
    "from_json",
    "SerializationError",
    "JsonConfig",
    "DEFAULT_JSON_CONFIG",
]
