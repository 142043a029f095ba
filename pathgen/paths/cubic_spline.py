"""
Cubic Bezier spline path generator.
"""

from collections.abc import Sequence

from pathgen.config import CurvatureSource
from pathgen.curves import CubicBezier, CurveEvaluator
from pathgen.geometry import Waypoint
from pathgen.segments import build_subpaths

from .base import PathGenerator


class CubicSplinePath(PathGenerator):
    """Piecewise cubic Bezier through the anchors, shaped by each waypoint's handles"""

    default_curvature_source = CurvatureSource.ANALYTIC

    def build_subpaths(self, waypoints: Sequence[Waypoint]) -> list[list[CurveEvaluator]]:
        return [
            [CubicBezier.from_group(group) for group in groups]
            for groups in build_subpaths(waypoints)
        ]
