"""Deterministic lagged-subtraction pseudo random number generator."""

from __future__ import annotations

MDIG = 32
M1 = (1 << (MDIG - 2)) + ((1 << (MDIG - 2)) - 1)
M2 = 1 << (MDIG // 2)
_DM1 = 1.0 / M1
_STATE_SIZE = 17


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    return a - b * _trunc_div(a, b)


class Random:
    """Generator of doubles in ``[left, right)``, reproducible from a seed."""

    def __init__(self, seed: int, left: float = 0.0, right: float = 1.0) -> None:
        self.seed = seed
        self.left = left
        self.right = right
        self.width = right - left
        self._m = self._initial_state(seed)
        self._i = 4
        self._j = 16

    @staticmethod
    def _initial_state(seed: int) -> list[int]:
        jseed = min(abs(seed), M1)
        if jseed % 2 == 0:
            jseed -= 1
        k0 = _trunc_mod(9069, M2)
        k1 = _trunc_div(9069, M2)
        j0 = _trunc_mod(jseed, M2)
        j1 = _trunc_div(jseed, M2)
        state = []
        for _ in range(_STATE_SIZE):
            jseed = j0 * k0
            j1 = _trunc_mod(_trunc_div(jseed, M2) + j0 * k1 + j1 * k0, M2 // 2)
            j0 = _trunc_mod(jseed, M2)
            state.append(j0 + M2 * j1)
        return state

    def next_double(self) -> float:
        """Return the next number of the sequence."""
        m = self._m
        k = m[self._i] - m[self._j]
        if k < 0:
            k += M1
        m[self._j] = k
        self._i = _STATE_SIZE - 1 if self._i == 0 else self._i - 1
        self._j = _STATE_SIZE - 1 if self._j == 0 else self._j - 1
        return self.left + _DM1 * float(k) * self.width

    def vector(self, n: int) -> list[float]:
        """Return a list of ``n`` successive numbers."""
        return [self.next_double() for _ in range(n)]

    def matrix(self, m: int, n: int) -> list[list[float]]:
        """Return an ``m`` by ``n`` matrix filled row by row."""
        return [self.vector(n) for _ in range(m)]