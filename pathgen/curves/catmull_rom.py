"""
Uniform Catmull-Rom segment and anchor chains.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pathgen.geometry import Point

from .base import CurveEvaluator
from .linear import LinearSegment


class CatmullRomSegment(CurveEvaluator):
    """
    Uniform Catmull-Rom span between P1 and P2.

    P0 and P3 only shape the tangents; the curve passes through P1 (t=0) and
    P2 (t=1).
    """

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point):
        super().__init__((p0, p1, p2, p3))
        p0a, p1a, p2a, p3a = self._ctrl
        # Power-basis coefficients of 0.5 * (c0 + c1 t + c2 t^2 + c3 t^3)
        self._c0 = 2 * p1a
        self._c1 = -p0a + p2a
        self._c2 = 2 * p0a - 5 * p1a + 4 * p2a - p3a
        self._c3 = -p0a + 3 * p1a - 3 * p2a + p3a

    def positions(self, ts: np.ndarray) -> np.ndarray:
        t = np.asarray(ts, dtype=float).reshape(-1, 1)
        return 0.5 * (self._c0 + self._c1 * t + self._c2 * t**2 + self._c3 * t**3)

    def derivative(self, t: float) -> Point:
        return Point.from_array(0.5 * (self._c1 + 2 * self._c2 * t + 3 * self._c3 * t * t))

    def second_derivative(self, t: float) -> Point:
        return Point.from_array(0.5 * (2 * self._c2 + 6 * self._c3 * t))


def catmull_rom_chain(anchors: Sequence[Point]) -> list[CurveEvaluator]:
    """
    Segments of a Catmull-Rom curve through every anchor.

    Phantom end points duplicate the first and last anchors. Two anchors give a
    single straight leg; fewer give nothing.
    """
    if len(anchors) < 2:
        return []
    if len(anchors) == 2:
        return [LinearSegment(anchors[0], anchors[1])]

    extended = [anchors[0], *anchors, anchors[-1]]
    return [
        CatmullRomSegment(extended[i - 1], extended[i], extended[i + 1], extended[i + 2])
        for i in range(1, len(extended) - 2)
    ]
