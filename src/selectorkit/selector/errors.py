"""Selector builder error types."""

from __future__ import annotations

from selectorkit.selector.model import FragmentKind


class SelectorError(ValueError):
    """Base error for invalid selector construction."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateFragmentError(SelectorError):
    """Raised when an element, id or pseudo-element is appended twice."""

    def __init__(self, kind: FragmentKind):
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            kind=kind,
        )


class OutOfOrderError(SelectorError):
    """Raised when a fragment would be appended after a higher-ranked one."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind):
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
