"""Parse SVG path data and calculate the bounding box."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias

from .bounds import Bounds
from .constants import (
    COMMANDS,
    MOVE_COMMANDS,
    NUMBER_PATTERNS,
    OPERAND_COUNTS,
    SEPARATOR_PATTERN,
    SUBCOMMAND_PATTERN,
    Grammar,
)
from .errors import MalformedPathError, UnsupportedCommandError
from .point import Point

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

Segment: TypeAlias = tuple[str, list[Point]]
"""A command as written and the absolute points it visited."""


def _is_supported(command: str) -> bool:
    """Check if the command is one of the straight line commands."""
    return command in COMMANDS


def _parse_numbers(command: str, data: str, grammar: Grammar) -> list[float]:
    """Extract the numeric operands of a subcommand.

    Raises:
        MalformedPathError: If anything but numbers and separators is found
            or a number cannot be converted.
    """
    pattern = NUMBER_PATTERNS[grammar]

    leftover = pattern.sub(" ", data)
    if not SEPARATOR_PATTERN.fullmatch(leftover):
        raise MalformedPathError(
            f"Unexpected characters in data of command {command!r}: {data.strip()!r}"
        )

    values: list[str] = pattern.findall(data)
    try:
        return [float(x) for x in values]
    except ValueError as e:
        raise MalformedPathError(
            f"Invalid number in data of command {command!r}: {data.strip()!r}"
        ) from e


def split_in_subcommands(
    d: str, grammar: Grammar = "svg"
) -> list[tuple[str, list[float]]]:
    """Split the path data into subcommands and their operands.

    Args:
        d: The path string.
        grammar: ``"svg"`` accepts the full SVG number syntax including signs
            and exponents. ``"legacy"`` is a degraded mode which only knows
            ``-?[0-9.]+``.

    Raises:
        ValueError: If the grammar is unknown.
        MalformedPathError: If the path is empty, has text before the first
            command, does not start with a move command or has invalid data.
        UnsupportedCommandError: If a command is not a straight line command.
    """
    if grammar not in NUMBER_PATTERNS:
        raise ValueError(f"Unknown number grammar: {grammar!r}")

    if grammar == "legacy":
        logger.warning("Parsing path data with the legacy number grammar")

    first = SUBCOMMAND_PATTERN.search(d)
    if first is None:
        raise MalformedPathError("No subcommands found in path data")

    if prefix := d[: first.start()].strip():
        raise MalformedPathError(
            f"Path data does not start with a command: {prefix!r}"
        )

    subcommands: list[tuple[str, list[float]]] = []

    for command, data in SUBCOMMAND_PATTERN.findall(d):
        if not _is_supported(command):
            raise UnsupportedCommandError(command)

        if not subcommands and command not in MOVE_COMMANDS:
            raise MalformedPathError(
                f"Path data has to start with a move command, got {command!r}"
            )

        subcommands.append((command, _parse_numbers(command, data, grammar)))

    return subcommands


def step(command: str, operands: list[float], curr_pos: Point) -> list[Point]:
    """Apply the operands of one subcommand to the current position.

    Every group of operands is a separate invocation of the command, so
    ``L 10 10 20 20`` visits two points.

    Returns:
        The position after each invocation. Empty for close path.

    Raises:
        UnsupportedCommandError: If the command is not a straight line command.
        MalformedPathError: If the operands do not fill complete groups.
    """
    if not _is_supported(command):
        raise UnsupportedCommandError(command)

    upper = command.upper()
    is_rel = command.islower()
    size = OPERAND_COUNTS[upper]  # type: ignore[index]

    if size == 0:
        if operands:
            raise MalformedPathError(f"Command {command!r} takes no operands")
        return []

    if not operands or len(operands) % size:
        raise MalformedPathError(
            f"Command {command!r} expects operands in groups of {size}, "
            f"got {len(operands)}"
        )

    points: list[Point] = []

    for i in range(0, len(operands), size):
        if upper == "H":
            value = operands[i]
            curr_pos = curr_pos.with_x(curr_pos.x + value if is_rel else value)
        elif upper == "V":
            value = operands[i]
            curr_pos = curr_pos.with_y(curr_pos.y + value if is_rel else value)
        else:
            point = Point(operands[i], operands[i + 1])
            curr_pos = curr_pos + point if is_rel else point

        points.append(curr_pos)

    return points


def get_segments_with_bounds(
    d: str, grammar: Grammar = "svg"
) -> tuple[list[Segment], Bounds]:
    """Parses the segments of the path data and calculates the bounds.

    The cursor starts at the origin and the first move command is applied
    like any other, so a leading ``m`` behaves like ``M``.

    Args:
        d: The path string.
        grammar: The number grammar, see :func:`split_in_subcommands`.

    Returns:
        A tuple with the segments of the path data and the bounds.

    Example:
        >>> segments, bounds = get_segments_with_bounds("M 10 10 L 20 20 10 30 Z")
        >>> segments[1]
        ('L', [Point(x=20.0, y=20.0), Point(x=10.0, y=30.0)])
        >>> bounds.as_bbox()
        (10.0, 10.0, 10.0, 20.0)
    """
    subcommands = split_in_subcommands(d, grammar)
    logger.debug("Split path data into %d subcommands", len(subcommands))

    segments: list[Segment] = []
    bounds = Bounds()
    curr_pos = Point(0, 0)

    for command, operands in subcommands:
        points = step(command, operands, curr_pos)

        for point in points:
            bounds.extend(point.x, point.y)

        if points:
            curr_pos = points[-1]

        segments.append((command, points))

    return segments, bounds


def iter_points(d: str, grammar: Grammar = "svg") -> Iterator[Point]:
    """Yield every point visited by the path data in order.

    The whole path is validated before the first point is yielded.
    """
    segments, _ = get_segments_with_bounds(d, grammar)

    for _, points in segments:
        yield from points


def bounds_from_path(d: str, grammar: Grammar = "svg") -> Bounds:
    """Calculate the smallest rectangle containing the path data.

    Only straight line commands are supported.

    Args:
        d: The path string.
        grammar: The number grammar, see :func:`split_in_subcommands`.

    Returns:
        A new :class:`Bounds` owned by the caller.

    Raises:
        UnsupportedCommandError: If a curve, arc or unknown command is used.
        MalformedPathError: If the path data is empty or incomplete.

    Example:
        >>> bounds_from_path("M 100 100L300 100 200 300z").as_bbox()
        (100.0, 100.0, 200.0, 200.0)
    """
    _, bounds = get_segments_with_bounds(d, grammar)
    logger.debug("Bounds of path data: %r", bounds)
    return bounds
