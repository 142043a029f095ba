"""
Cubic Bezier segment.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pathgen.geometry import Point

from .base import CurveEvaluator


class CubicBezier(CurveEvaluator):
    """Cubic Bezier arc from P0 to P3 shaped by handles P1 and P2"""

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point):
        super().__init__((p0, p1, p2, p3))

    @classmethod
    def from_group(cls, group: Sequence[Point]) -> CubicBezier:
        return cls(group[0], group[1], group[2], group[3])

    def positions(self, ts: np.ndarray) -> np.ndarray:
        t = np.asarray(ts, dtype=float).reshape(-1, 1)
        mt = 1.0 - t
        basis = np.hstack([mt**3, 3 * mt**2 * t, 3 * mt * t**2, t**3])  # (N, 4)
        return basis @ self._ctrl

    def derivative(self, t: float) -> Point:
        p0, p1, p2, p3 = self._ctrl
        mt = 1.0 - t
        d = 3 * mt * mt * (p1 - p0) + 6 * mt * t * (p2 - p1) + 3 * t * t * (p3 - p2)
        return Point.from_array(d)

    def second_derivative(self, t: float) -> Point:
        p0, p1, p2, p3 = self._ctrl
        dd = 6 * (1.0 - t) * (p2 - 2 * p1 + p0) + 6 * t * (p3 - 2 * p2 + p1)
        return Point.from_array(dd)
