"""
Quadrature and Normalization Primitives.

Composite trapezoidal rule on a uniform grid plus the two normalizers
used everywhere else:
- normalize: divide by the arithmetic sum (discrete distributions)
- normalize_density: divide by the trapezoidal integral (densities)

Zero total mass is not an error: both normalizers return None,
the explicit "undefined" value.
"""

from typing import Optional, Sequence

from bayeslens.exceptions import InvalidGridError


def trapz(values: Sequence[float], dz: float) -> float:
    """
    Composite trapezoidal rule.

    dz * (v[0]/2 + v[1] + ... + v[n-2] + v[n-1]/2); fewer than two
    points integrate to 0.
    """
    n = len(values)
    if n < 2:
        return 0.0
    total = (values[0] + values[n - 1]) / 2
    for i in range(1, n - 1):
        total += values[i]
    return dz * total


def normalize(values: Sequence[float]) -> Optional[list[float]]:
    """Scale values to sum to 1. None if the sum is exactly 0."""
    total = sum(values)
    if total == 0:
        return None
    return [v / total for v in values]


def normalize_density(values: Sequence[float], dz: float) -> Optional[list[float]]:
    """Scale values to integrate to 1 over the grid. None if the integral is exactly 0."""
    integral = trapz(values, dz)
    if integral == 0:
        return None
    return [v / integral for v in values]


def grid_points(n: int, domain: tuple[float, float]) -> list[float]:
    """n evenly spaced points a + (i / (n - 1)) * (b - a), endpoints included."""
    a, b = domain
    if n <= 0:
        return []
    if n == 1:
        return [a]
    return [a + (i / (n - 1)) * (b - a) for i in range(n)]


def grid_spacing(n: int, domain: tuple[float, float]) -> float:
    """Uniform spacing dz = (b - a) / (n - 1)."""
    a, b = domain
    if n < 2:
        raise InvalidGridError(
            "Grid needs at least 2 points",
            details={"point_count": n},
        )
    if not a < b:
        raise InvalidGridError(
            "Domain lower bound must be below upper bound",
            details={"domain": [a, b]},
        )
    return (b - a) / (n - 1)
