"""Accumulate the bounding rectangle of points and path data."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias, TypedDict

import numpy as np
from typing_extensions import Self, override

from .errors import EmptyBoundsError
from .point import Point

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy.typing as npt

    from .constants import Grammar

BBox: TypeAlias = tuple[float, float, float, float]
"""Bounding box as a tuple (x, y, width, height)."""

Corners: TypeAlias = tuple[float, float, float, float]


class BoundsRecord(TypedDict):
    """Plain snapshot of a non-empty :class:`Bounds`."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    height: float


class Bounds:
    """Smallest axis aligned rectangle containing every observed point.

    A ``Bounds`` is a mutable accumulator owned by whoever holds it:
    :meth:`extend`, :meth:`union` and :meth:`union_path` update it in place
    and return it for chaining. It starts out empty and only reports corners
    once at least one point has been added.

    Example:
        >>> bounds = Bounds.from_path("M 100 100L300 100 200 300z")
        >>> bounds.width
        200.0
        >>> bounds.extend(350, 100).width
        250.0
    """

    __slots__ = ("_corners",)

    def __init__(
        self,
        x1: float | None = None,
        y1: float | None = None,
        x2: float | None = None,
        y2: float | None = None,
    ) -> None:
        """Initialize the bounds.

        Without arguments the bounds are empty. Otherwise all four
        coordinates are required; they are normalized so that the first
        corner is the top left one.

        Raises:
            TypeError: If only some of the coordinates are given.
        """
        self._corners: Corners | None = None

        given = [v is not None for v in (x1, y1, x2, y2)]
        if not any(given):
            return
        if not all(given):
            raise TypeError("Either all or none of x1, y1, x2, y2 must be given")

        self.extend(x1, y1).extend(x2, y2)  # type: ignore[arg-type]

    @classmethod
    def from_path(cls, d: str, grammar: Grammar = "svg") -> Bounds:
        """Calculate the bounds of the path data ``d``."""
        from .bbox import bounds_from_path

        return bounds_from_path(d, grammar)

    @classmethod
    def from_points(cls, points: Iterable[complex | tuple[float, float]]) -> Self:
        """Calculate the bounds from multiple points.

        Args:
            points: Points as complex numbers or ``(x, y)`` pairs.

        Raises:
            EmptyBoundsError: If no points are given.
        """
        converted = [p if isinstance(p, complex) else Point(*p) for p in points]
        if not converted:
            raise EmptyBoundsError("No bounding box points found")

        upper_left = Point.min(*converted)
        lower_right = Point.max(*converted)

        return cls(upper_left.x, upper_left.y, lower_right.x, lower_right.y)

    @property
    def is_empty(self) -> bool:
        """If no point has been observed yet."""
        return self._corners is None

    def __bool__(self) -> bool:
        return self._corners is not None

    def _require(self) -> Corners:
        if self._corners is None:
            raise EmptyBoundsError("Bounds are empty")
        return self._corners

    @property
    def x1(self) -> float:
        """Left edge."""
        return self._require()[0]

    @property
    def y1(self) -> float:
        """Top edge."""
        return self._require()[1]

    @property
    def x2(self) -> float:
        """Right edge."""
        return self._require()[2]

    @property
    def y2(self) -> float:
        """Bottom edge."""
        return self._require()[3]

    @property
    def width(self) -> float:
        """Horizontal extent."""
        x1, _, x2, _ = self._require()
        return x2 - x1

    @property
    def height(self) -> float:
        """Vertical extent."""
        _, y1, _, y2 = self._require()
        return y2 - y1

    def extend(self, x: float, y: float) -> Self:
        """Grow the bounds to contain the point ``(x, y)``."""
        x, y = float(x), float(y)

        if self._corners is None:
            self._corners = (x, y, x, y)
            return self

        x1, y1, x2, y2 = self._corners
        self._corners = (min(x1, x), min(y1, y), max(x2, x), max(y2, y))
        return self

    def union(self, other: Bounds) -> Self:
        """Grow the bounds to contain ``other``. Empty ``other`` is a no-op."""
        if other._corners is None:
            return self

        x1, y1, x2, y2 = other._corners
        return self.extend(x1, y1).extend(x2, y2)

    def union_path(self, d: str, grammar: Grammar = "svg") -> Self:
        """Grow the bounds to contain the path data ``d``."""
        return self.union(Bounds.from_path(d, grammar))

    def copy(self) -> Self:
        """An independent copy of the bounds."""
        new = self.__class__()
        new._corners = self._corners
        return new

    def as_bbox(self) -> BBox:
        """The bounds as a tuple (x, y, width, height)."""
        x1, y1, x2, y2 = self._require()
        return x1, y1, x2 - x1, y2 - y1

    def to_record(self) -> BoundsRecord:
        """Plain serializable snapshot with corners and size."""
        x1, y1, x2, y2 = self._require()
        return {
            "x1": x1,
            "y1": y1,
            "x2": x2,
            "y2": y2,
            "width": x2 - x1,
            "height": y2 - y1,
        }

    def to_array(self) -> npt.NDArray[np.float64]:
        """The corners as an array ``[x1, y1, x2, y2]``."""
        return np.array(self._require(), dtype=np.float64)

    def __contains__(self, point: complex) -> bool:
        """Checks if a point lies inside or on the edge of the bounds."""
        if self._corners is None:
            return False

        x1, y1, x2, y2 = self._corners
        return x1 <= point.real <= x2 and y1 <= point.imag <= y2

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._corners == other._corners

    __hash__ = None  # type: ignore[assignment]

    @override
    def __repr__(self) -> str:
        if self._corners is None:
            return "Bounds()"
        x1, y1, x2, y2 = self._corners
        return f"Bounds(x1={x1}, y1={y1}, x2={x2}, y2={y2})"
