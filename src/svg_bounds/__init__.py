"""Bounding rectangles of straight line SVG path data."""

from __future__ import annotations

from svg_bounds.document import document_bounds, path_data
from svg_bounds.logging_config import setup_logging
from svg_bounds.path_bbox import (
    BBox,
    Bounds,
    BoundsRecord,
    EmptyBoundsError,
    MalformedPathError,
    PathError,
    Point,
    Segment,
    UnsupportedCommandError,
    bounds_from_path,
    get_segments_with_bounds,
    iter_points,
    split_in_subcommands,
)

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
    "document_bounds",
    "get_segments_with_bounds",
    "iter_points",
    "path_data",
    "setup_logging",
    "split_in_subcommands",
]
