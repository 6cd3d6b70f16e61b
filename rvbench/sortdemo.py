"""Sort a fixed set of doubles and print them before and after."""

from __future__ import annotations

import sys
from collections.abc import Iterable

VALUES = (-192.293, 382.19, 382.18, -192.294, 0.000001, 283874923.123, 0.0000001)


def format_values(values: Iterable[float]) -> str:
    """Format each value in exponent notation, each followed by a space."""
    return "".join(f"{v:e} " for v in values)


def sorted_values(values: Iterable[float]) -> list[float]:
    """Return the values in ascending order."""
    return sorted(values)


def main(argv: list[str] | None = None) -> int:
    """Print the built-in values before and after sorting."""
    out = sys.stdout
    out.write("Before sorting: \n")
    out.write(format_values(VALUES))
    out.write("\nAfter sorting: \n")
    out.write(format_values(sorted_values(VALUES)))
    out.write("\n")
    return 0