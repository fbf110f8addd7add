"""Point type used as the cursor while stepping through path data."""

from __future__ import annotations

from typing_extensions import Self, override


class Point(complex):
    """A point in 2D space. Wrapper for complex numbers.

    Examples:
        >>> Point(1, 2) + Point(3, 4)
        Point(x=4.0, y=6.0)
        >>> Point(1, 2).with_x(5)
        Point(x=5.0, y=2.0)
    """

    @override
    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    @property
    def x(self) -> float:
        """The x coordinate."""
        return self.real

    @property
    def y(self) -> float:
        """The y coordinate."""
        return self.imag

    @override
    def __add__(self, other: complex) -> Self:
        return self.__class__(super().__add__(other))

    def with_x(self, x: float) -> Self:
        """A copy of the point with a new x coordinate."""
        return self.__class__(x, self.imag)

    def with_y(self, y: float) -> Self:
        """A copy of the point with a new y coordinate."""
        return self.__class__(self.real, y)

    @classmethod
    def min(cls, *points: complex) -> Point:
        """Get the minimum point."""
        return cls(min(x.real for x in points), min(x.imag for x in points))

    @classmethod
    def max(cls, *points: complex) -> Point:
        """Get the maximum point."""
        return cls(max(x.real for x in points), max(x.imag for x in points))
