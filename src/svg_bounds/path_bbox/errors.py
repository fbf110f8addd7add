"""Exceptions raised while parsing path data or querying bounds."""

from __future__ import annotations


class PathError(ValueError):
    """Base class for invalid path data."""


class UnsupportedCommandError(PathError):
    """The path data uses a command outside of the straight line subset."""

    def __init__(self, command: str) -> None:
        """Initialize the error.

        Args:
            command: The offending command letter.
        """
        super().__init__(f"Unsupported path command: {command!r}")
        self.command = command


class MalformedPathError(PathError):
    """The path data cannot be split into complete commands."""


class EmptyBoundsError(ValueError):
    """The bounds have not observed any point yet."""
