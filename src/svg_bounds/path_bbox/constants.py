"""Constants for the SVG path utilities."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = "MLVHZmlvhz"
"""A string containing all the supported SVG path commands."""

MOVE_COMMANDS = set("Mm")
"""The commands a path has to start with."""

ValidCommand: TypeAlias = Literal["M", "L", "V", "H", "Z"]
"""A type alias for the supported SVG path commands."""

Grammar: TypeAlias = Literal["svg", "legacy"]
"""Name of a numeric literal grammar."""

# every letter except the exponent marker starts a new subcommand,
# so curve and arc commands end up in a group of their own
SUBCOMMAND_PATTERN = re.compile(r"([A-DF-Za-df-z])([^A-DF-Za-df-z]*)")
"""A regex pattern to match SVG path subcommands."""

NUMBER_PATTERNS: dict[Grammar, re.Pattern[str]] = {
    # see https://www.w3.org/TR/SVG/paths.html#PathDataBNF
    "svg": re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"),
    "legacy": re.compile(r"-?[0-9.]+"),
}
"""Numeric literal patterns by grammar name."""

SEPARATOR_PATTERN = re.compile(r"[,\s]*")
"""A regex pattern for what may remain of a subcommand after removing numbers."""

OPERAND_COUNTS: dict[ValidCommand, int] = {
    "M": 2,
    "L": 2,
    "V": 1,
    "H": 1,
    "Z": 0,
}
"""The number of values consumed by one invocation of each SVG path command."""
