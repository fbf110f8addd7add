"""Parse SVG path data and calculate the bounding box."""

from __future__ import annotations

from .bbox import (
    Segment,
    bounds_from_path,
    get_segments_with_bounds,
    iter_points,
    split_in_subcommands,
)
from .bounds import BBox, Bounds, BoundsRecord
from .errors import (
    EmptyBoundsError,
    MalformedPathError,
    PathError,
    UnsupportedCommandError,
)
from .point import Point

__all__ = [
    "BBox",
    "Bounds",
    "BoundsRecord",
    "EmptyBoundsError",
    "MalformedPathError",
    "PathError",
    "Point",
    "Segment",
    "UnsupportedCommandError",
    "bounds_from_path",
    "get_segments_with_bounds",
    "iter_points",
    "split_in_subcommands",
]
