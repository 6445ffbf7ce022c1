"""Selector model: fragment ranks and combinator glyphs."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class FragmentKind(IntEnum):
    """Kind of selector fragment, valued by its required position.

    Fragments must be appended in non-decreasing rank order:
        element < id < class < attribute < pseudo-class < pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


# Kinds that may occur at most once per selector.
SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(StrEnum):
    """Glyphs joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    COLUMN = "||"
