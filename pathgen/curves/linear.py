"""
Straight line segment.
"""

import numpy as np

from pathgen.geometry import ORIGIN, Point

from .base import CurveEvaluator


class LinearSegment(CurveEvaluator):
    """Straight leg from start (t=0) to end (t=1); curvature is always 0."""

    def __init__(self, start: Point, end: Point):
        super().__init__((start, end))

    def positions(self, ts: np.ndarray) -> np.ndarray:
        t = np.asarray(ts, dtype=float).reshape(-1, 1)
        return (1.0 - t) * self._ctrl[0] + t * self._ctrl[1]

    def derivative(self, t: float) -> Point:
        return self.control_points[1] - self.control_points[0]

    def second_derivative(self, t: float) -> Point:
        return ORIGIN

    def curvature(self, t: float) -> float:
        return 0.0

    def length(self, intervals: int = 0) -> float:
        return self.control_points[0].distance(self.control_points[1])
