"""
Monotone Cubic Interpolation (Fritsch–Carlson).

Shape-preserving piecewise cubic Hermite interpolation. Between any two
control points where the data is monotone the interpolant is monotone too,
so non-negative control values never produce negative densities
(a natural cubic spline can overshoot below zero).

Algorithm:
1. Secant slopes δ_i between consecutive control points
2. Initial tangents: endpoint = adjacent secant; interior = mean of the
   two secants, or 0 at a local extremum
3. Limiting pass: α² + β² ≤ 9 per segment (Fritsch–Carlson condition)
4. Hermite evaluation, clamped to the end values outside the knots
"""

import bisect
import math
from typing import Sequence

# Secants below this magnitude are treated as flat segments
FLAT_SECANT_EPSILON: float = 1e-30

# Fritsch–Carlson sufficient condition: α² + β² ≤ 9
MONOTONE_TAU_LIMIT: float = 9.0


class MonotoneCubic:
    """
    Fritsch–Carlson interpolant over fixed control points.

    Tangents are computed once; the instance can be evaluated repeatedly.
    xs must be strictly increasing.
    """

    def __init__(self, xs: Sequence[float], ys: Sequence[float]):
        self.xs = list(xs)
        self.ys = list(ys)
        self.tangents = self._compute_tangents(self.xs, self.ys)

    def __call__(self, eval_xs: Sequence[float]) -> list[float]:
        return [self.evaluate(x) for x in eval_xs]

    def evaluate(self, x: float) -> float:
        """Interpolated value at a single abscissa."""
        xs, ys, m = self.xs, self.ys, self.tangents
        n = len(xs)
        if n == 0:
            return 0.0
        if n == 1:
            return ys[0]

        # Clamp to domain
        if x <= xs[0]:
            return ys[0]
        if x >= xs[n - 1]:
            return ys[n - 1]

        lo = bisect.bisect_right(xs, x) - 1
        hi = lo + 1

        dx = xs[hi] - xs[lo]
        t = (x - xs[lo]) / dx
        t2 = t * t
        t3 = t2 * t

        # Hermite basis
        h00 = 2 * t3 - 3 * t2 + 1
        h10 = t3 - 2 * t2 + t
        h01 = -2 * t3 + 3 * t2
        h11 = t3 - t2

        return h00 * ys[lo] + h10 * dx * m[lo] + h01 * ys[hi] + h11 * dx * m[hi]

    # ── Private helpers ──────────────────────────────────────────────────

    @staticmethod
    def _compute_tangents(xs: list[float], ys: list[float]) -> list[float]:
        n = len(xs)
        if n < 2:
            return [0.0] * n

        deltas = [(ys[i + 1] - ys[i]) / (xs[i + 1] - xs[i]) for i in range(n - 1)]

        m = [0.0] * n
        m[0] = deltas[0]
        m[n - 1] = deltas[n - 2]
        for i in range(1, n - 1):
            if deltas[i - 1] * deltas[i] <= 0:
                m[i] = 0.0
            else:
                m[i] = (deltas[i - 1] + deltas[i]) / 2

        for i in range(n - 1):
            if abs(deltas[i]) < FLAT_SECANT_EPSILON:
                m[i] = 0.0
                m[i + 1] = 0.0
                continue
            alpha = m[i] / deltas[i]
            beta = m[i + 1] / deltas[i]
            tau = alpha * alpha + beta * beta
            if tau > MONOTONE_TAU_LIMIT:
                s = 3 / math.sqrt(tau)
                m[i] = s * alpha * deltas[i]
                m[i + 1] = s * beta * deltas[i]

        return m


def interpolate_monotone(
    xs: Sequence[float],
    ys: Sequence[float],
    eval_xs: Sequence[float],
) -> list[float]:
    """
    Interpolate control points onto eval_xs with a monotone cubic spline.

    Args:
        xs: Control point abscissas, strictly increasing
        ys: Control point values
        eval_xs: Query abscissas, any order

    Returns:
        One value per query point. No control points → all 0;
        one control point → all equal to it.
    """
    return MonotoneCubic(xs, ys)(eval_xs)
