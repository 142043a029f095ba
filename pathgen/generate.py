"""
Single entry point for path generation.

Callers re-run ``generate`` whenever the waypoints or config change; nothing is
cached between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

from pathgen.config import PathAlgorithm, PathConfig
from pathgen.geometry import GeneratedPoint, Waypoint
from pathgen.paths import CatmullRomPath, CubicSplinePath, LinearPath, PathGenerator

PATH_ALGORITHMS: dict[PathAlgorithm, type[PathGenerator]] = {
    PathAlgorithm.CUBIC_SPLINE: CubicSplinePath,
    PathAlgorithm.CATMULL_ROM: CatmullRomPath,
    PathAlgorithm.LINEAR: LinearPath,
}


def get_generator(config: PathConfig | None = None) -> PathGenerator:
    """Generator instance for ``config.algorithm``."""
    config = config if config is not None else PathConfig()
    return PATH_ALGORITHMS[config.algorithm](config)


def generate(
    waypoints: Sequence[Waypoint],
    config: PathConfig | None = None,
    k: float | None = None,
) -> list[GeneratedPoint]:
    """
    Generate the timed motion profile for ``waypoints``.

    Args:
        waypoints: Authored waypoints in path order
        config: Robot limits and options (defaults from env if None)
        k: Cornering constant override (``config.k`` if None)

    Returns:
        Generated points in path order
    """
    return get_generator(config).generate(waypoints, k)
