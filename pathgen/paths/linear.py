"""
Linear path generator.
"""

from collections.abc import Sequence

from pathgen.geometry import GeneratedPoint, Waypoint

from .base import PathGenerator


class LinearPath(PathGenerator):
    """
    Straight legs between anchors with no curvature or velocity shaping.

    Each waypoint becomes one point driven at ``max_velocity``, signed by the
    current direction. ``time`` is the point index, not a physical time. The
    first and last points are at rest.
    """

    def generate(self, waypoints: Sequence[Waypoint], k: float | None = None) -> list[GeneratedPoint]:
        if not self.can_generate(waypoints):
            return []

        v = self.config.max_velocity
        reverse = waypoints[0].reverse
        last = len(waypoints) - 1
        points: list[GeneratedPoint] = []
        for idx, wp in enumerate(waypoints):
            if 0 < idx < last and wp.reverse:
                reverse = not reverse
            speed = 0.0 if idx in (0, last) else (-v if reverse else v)
            points.append(GeneratedPoint(wp.x, wp.y, float(idx), speed, 0.0))
        return points
