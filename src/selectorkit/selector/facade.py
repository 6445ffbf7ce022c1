"""Factory functions that start a new selector per call.

Usage:
    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.model import Combinator

__all__ = [
    "element",
    "id",
    "class_",
    "attribute",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attribute(value: str) -> SelectorBuilder:
    return SelectorBuilder().attribute(value)


attr = attribute


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: SelectorBuilder, combinator: Combinator | str, right: SelectorBuilder
) -> SelectorBuilder:
    """Join two built selectors into a new one, e.g. ``div + table``."""
    return SelectorBuilder().combine(left, combinator, right)
