"""Small numeric algorithms."""

from __future__ import annotations

import math


def gcd(a: float, b: float) -> float:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    a, b = float(a), float(b)
    while b != 0:
        a, b = b, math.fmod(a, b)
    return a


def parts(n: int, k: int) -> list[float]:
    """Return ``k`` evenly spaced points strictly between 0 and ``n``."""
    if k < 0:
        raise ValueError(f"number of parts must not be negative, got {k}")
    step = float(n) / float(k + 1)
    return [step * float(i) for i in range(1, k + 1)]