"""Rectangle value object."""

from __future__ import annotations


class Rectangle:
    """A rectangle with caller-supplied sides.

    Sides are stored as given; negative, zero or non-numeric values are not
    rejected. The area is computed on every access.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def get_area(self) -> float:
        """Return ``width * height``."""
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"
