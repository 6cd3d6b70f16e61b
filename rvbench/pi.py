"""Spigot computation of the first 800 decimal digits of pi."""

from __future__ import annotations

import sys
from collections.abc import Iterator

_BASE = 10000
_TERMS = 2800
_STEP = 14


def _chunks() -> Iterator[int]:
    """Yield pi four digits at a time."""
    f = [_BASE // 5] * _TERMS + [0]
    c = _TERMS
    e = 0
    while c:
        d = 0
        g = c * 2
        b = c
        while True:
            d += f[b] * _BASE
            g -= 1
            f[b] = d % g
            d //= g
            g -= 1
            b -= 1
            if b == 0:
                break
            d *= b
        yield e + d // _BASE
        e = d % _BASE
        c -= _STEP


def pi_digits() -> str:
    """Return the first 800 digits of pi, without a decimal point."""
    return "".join(f"{chunk:04d}" for chunk in _chunks())


def main(argv: list[str] | None = None) -> int:
    """Print the digits followed by a blank line."""
    sys.stdout.write(pi_digits() + "\n\n")
    return 0