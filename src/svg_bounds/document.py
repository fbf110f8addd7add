"""Bounds of the path elements in an SVG document."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from defusedxml.ElementTree import fromstring

from svg_bounds.path_bbox import Bounds

if TYPE_CHECKING:
    from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "{http://www.w3.org/2000/svg}"

SKIPPED_TAGS = {"clipPath", "defs", "marker", "mask", "pattern", "symbol"}
"""Containers whose content is not drawn where it is defined."""


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}path")
        'path'
        >>> filtered_tag("path")
        'path'
    """
    return re.sub(r"\{.*\}", "", tag)


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree from a string or a file."""
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return fromstring(data)  # type: ignore[no-any-return]


def _offset_of(elem: ET.Element, tag: str, is_root: bool) -> str | None:
    """Describe what moves the content of ``elem``, if anything."""
    if "transform" in elem.attrib:
        return f"transform on <{tag}>"

    # x and y of the outermost svg do not move its content
    if tag == "svg" and not is_root:
        x, y = elem.attrib.get("x", "0"), elem.attrib.get("y", "0")
        if x.strip() not in {"", "0"} or y.strip() not in {"", "0"}:
            return "x/y offset on nested <svg>"

    return None


def _collect(
    elem: ET.Element,
    found: list[str],
    inherited_offset: str | None = None,
    is_root: bool = True,
) -> None:
    """Collect the path data below ``elem`` in document order.

    Raises:
        NotImplementedError: If a path with data is moved by a transform or
            a nested svg offset.
    """
    if not elem.tag.startswith(SVG_NAMESPACE):
        return

    tag = filtered_tag(elem.tag)
    if tag in SKIPPED_TAGS:
        return

    offset = inherited_offset or _offset_of(elem, tag, is_root)

    if tag == "path" and (d := elem.attrib.get("d", "").strip()):
        if offset is not None:
            raise NotImplementedError(f"Transforms are not supported ({offset})")
        found.append(d)

    for child in elem:
        _collect(child, found, offset, is_root=False)


def path_data(data: str | Path) -> list[str]:
    """Get the ``d`` attribute of every drawn path in an SVG document.

    Args:
        data: The SVG document as a string or a path to a file.

    Raises:
        NotImplementedError: If a path or one of its ancestors has a transform
            or a path is inside a nested svg with an x or y offset.
    """
    found: list[str] = []
    _collect(read_tree(data), found)

    logger.debug("Found %d paths in document", len(found))
    return found


def document_bounds(data: str | Path) -> Bounds:
    """Union of the bounds of every drawn path in an SVG document.

    Returns empty bounds if the document has no path data.
    """
    bounds = Bounds()

    for d in path_data(data):
        bounds.union_path(d)

    return bounds
