"""
Base path generator.

Provides the shared sample -> profile -> stitch pipeline for derived generators.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from pathgen.config import CurvatureSource, PathConfig
from pathgen.curves import CurveEvaluator
from pathgen.geometry import GeneratedPoint, Waypoint
from pathgen.profile import build_profile
from pathgen.sampling import sample_segments
from pathgen.stitch import stitch

logger = logging.getLogger(__name__)


class PathGenerator:
    """Base class for path generation from authored waypoints"""

    # Curvature used for angular velocity unless the config overrides it
    default_curvature_source: CurvatureSource = CurvatureSource.ANALYTIC

    def __init__(self, config: PathConfig | None = None):
        """
        Initialize path generator

        Args:
            config: Robot limits and generation options (defaults from env)
        """
        self.config = config if config is not None else PathConfig()

    @property
    def curvature_source(self) -> CurvatureSource:
        if self.config.curvature_source is not None:
            return self.config.curvature_source
        return self.default_curvature_source

    def build_subpaths(self, waypoints: Sequence[Waypoint]) -> list[list[CurveEvaluator]]:
        """Curve segments for each sub-path, cut at reversal waypoints."""
        raise NotImplementedError

    def can_generate(self, waypoints: Sequence[Waypoint], k: float | None = None) -> bool:
        """
        False for fewer than 2 waypoints or unusable limits.

        Args:
            waypoints: Authored waypoints in path order
            k: Cornering constant override checked in place of ``config.k``
        """
        if len(waypoints) < 2:
            return False
        cfg = self.config if k is None else replace(self.config, k=float(k))
        if not cfg.is_valid:
            logger.warning(
                f"Skipping generation: spacing={cfg.spacing}, "
                f"max_velocity={cfg.max_velocity}, "
                f"max_acceleration={cfg.max_acceleration}, "
                f"k={cfg.k} must all be finite and positive"
            )
            return False
        return True

    def generate(self, waypoints: Sequence[Waypoint], k: float | None = None) -> list[GeneratedPoint]:
        """
        Generate the timed path for ``waypoints``.

        Args:
            waypoints: Authored waypoints in path order
            k: Cornering constant (config value if None)

        Returns:
            Generated points; empty for fewer than 2 waypoints or an unusable config
        """
        if not self.can_generate(waypoints, k):
            return []

        k = self.config.k if k is None else float(k)
        subpaths = [self.profile_subpath(segments, k) for segments in self.build_subpaths(waypoints)]
        points = stitch(subpaths, start_reversed=waypoints[0].reverse)
        logger.debug(
            f"{type(self).__name__}: {len(waypoints)} waypoints, "
            f"{len(subpaths)} sub-path(s) -> {len(points)} points"
        )
        return points

    def profile_subpath(self, segments: Sequence[CurveEvaluator], k: float) -> list[GeneratedPoint]:
        """Sample one sub-path and run it through the velocity profile."""
        cfg = self.config
        samples = sample_segments(segments, cfg.spacing, cfg.max_velocity, k, cfg.sampling)
        if len(samples) == 0:
            return []
        return build_profile(samples, cfg.max_acceleration, self.curvature_source).points()
