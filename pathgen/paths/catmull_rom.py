"""
Catmull-Rom path generator.
"""

from collections.abc import Sequence

from pathgen.config import CurvatureSource
from pathgen.curves import CurveEvaluator, catmull_rom_chain
from pathgen.geometry import Waypoint
from pathgen.segments import split_anchor_runs

from .base import PathGenerator


class CatmullRomPath(PathGenerator):
    """
    Catmull-Rom curve through every anchor.

    Handles are ignored. Angular velocity defaults to the discrete, smoothed
    curvature of the sampled points.
    """

    default_curvature_source = CurvatureSource.DISCRETE

    def build_subpaths(self, waypoints: Sequence[Waypoint]) -> list[list[CurveEvaluator]]:
        return [catmull_rom_chain(anchors) for anchors in split_anchor_runs(waypoints)]
