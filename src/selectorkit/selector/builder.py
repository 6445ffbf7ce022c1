"""Chainable builder producing CSS selector strings.

Example:
    SelectorBuilder().element("a").attribute('href$=".png"').pseudo_class("focus")
    renders as ``a[href$=".png"]:focus``.
"""

from __future__ import annotations

import logging

from selectorkit.selector.errors import DuplicateFragmentError, OutOfOrderError
from selectorkit.selector.model import Combinator, FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments in append order.

    Each append method validates the fragment against the ones already
    recorded and returns the builder itself so calls can be chained.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._ranks: list[FragmentKind] = []
        self.seen_element = False
        self.seen_id = False
        self.seen_pseudo_element = False

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        """Append a type selector, e.g. ``div``."""
        if self.seen_element:
            raise DuplicateFragmentError(FragmentKind.ELEMENT)
        self._append(FragmentKind.ELEMENT, f"{value}")
        self.seen_element = True
        return self

    def id(self, value: str) -> SelectorBuilder:
        """Append an id selector, e.g. ``#main``."""
        if self.seen_id:
            raise DuplicateFragmentError(FragmentKind.ID)
        self._append(FragmentKind.ID, f"#{value}")
        self.seen_id = True
        return self

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class selector, e.g. ``.container``."""
        self._append(FragmentKind.CLASS, f".{value}")
        return self

    def attribute(self, value: str) -> SelectorBuilder:
        """Append an attribute selector, e.g. ``[href$=".png"]``."""
        self._append(FragmentKind.ATTRIBUTE, f"[{value}]")
        return self

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class, e.g. ``:focus``."""
        self._append(FragmentKind.PSEUDO_CLASS, f":{value}")
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append a pseudo-element, e.g. ``::after``."""
        if self.seen_pseudo_element:
            raise DuplicateFragmentError(FragmentKind.PSEUDO_ELEMENT)
        self._append(FragmentKind.PSEUDO_ELEMENT, f"::{value}")
        self.seen_pseudo_element = True
        return self

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Combinator | str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Replace this builder's fragments with ``left combinator right``.

        The combinator is padded with one space on each side and is not
        validated. Ranks and singleton flags already recorded are kept.
        """
        self._fragments = [left.stringify(), f" {combinator} ", right.stringify()]
        logger.debug("Combined selector: %r", self._fragments)
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text."""
        return "".join(self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _append(self, kind: FragmentKind, text: str) -> None:
        if self._ranks and self._ranks[-1] > kind:
            logger.debug(
                "Rejected %s after %s: %r", kind.name, self._ranks[-1].name, text
            )
            raise OutOfOrderError(kind, previous=self._ranks[-1])
        self._fragments.append(text)
        self._ranks.append(kind)
