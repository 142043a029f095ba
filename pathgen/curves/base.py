"""
Base curve evaluator.

Provides the shared curvature and arc-length machinery for derived segments.
"""

from collections.abc import Sequence

import numpy as np
from scipy.integrate import simpson

from pathgen.config import SIMPSON_INTERVALS
from pathgen.geometry import Point


class CurveEvaluator:
    """One parametric curve segment on t in [0, 1]."""

    def __init__(self, control_points: Sequence[Point]):
        """
        Initialize curve evaluator

        Args:
            control_points: Control points in curve order
        """
        self.control_points = tuple(control_points)
        self._ctrl = np.array([[p.x, p.y] for p in self.control_points], dtype=float)

    def __repr__(self) -> str:
        pts = ", ".join(f"({p.x:g}, {p.y:g})" for p in self.control_points)
        return f"{type(self).__name__}({pts})"

    def evaluate(self, t: float) -> Point:
        return Point.from_array(self.positions(np.array([t]))[0])

    def positions(self, ts: np.ndarray) -> np.ndarray:
        """Positions at each parameter in ``ts``; shape (N, 2)."""
        raise NotImplementedError

    def derivative(self, t: float) -> Point:
        raise NotImplementedError

    def second_derivative(self, t: float) -> Point:
        raise NotImplementedError

    def speed(self, t: float) -> float:
        """Parametric speed |B'(t)|."""
        return self.derivative(t).norm()

    def curvature(self, t: float) -> float:
        """
        Signed curvature (x'y'' - y'x'') / (x'^2 + y'^2)^1.5.

        A zero denominator (stationary point) yields 0.
        """
        d1 = self.derivative(t)
        d2 = self.second_derivative(t)
        denominator = (d1.x * d1.x + d1.y * d1.y) ** 1.5
        if denominator == 0:
            return 0.0
        return d1.cross(d2) / denominator

    def length(self, intervals: int = SIMPSON_INTERVALS) -> float:
        """
        Arc length by composite Simpson's rule over |B'(t)|.

        Args:
            intervals: Subdivision count; odd values are rounded up by one

        Returns:
            Segment length in field units
        """
        n = max(2, int(intervals))
        if n % 2 != 0:
            n += 1
        ts = np.linspace(0.0, 1.0, n + 1)
        speeds = np.array([self.speed(float(t)) for t in ts])
        return float(simpson(speeds, dx=1.0 / n))
