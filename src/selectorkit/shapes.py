"""Simple geometric data objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """Axis-aligned rectangle.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height, r.area
        (10, 20, 200)
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
