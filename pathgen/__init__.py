"""
pathgen Python Package

Turns authored waypoints (anchors with tangent handles and reverse flags) into
a timed, curvature- and acceleration-limited motion profile for a 2D robot.

Key components:
- generate: Uniform entry point selecting the curve family from a PathConfig
- PathConfig: Robot limits and generation options (env-overridable defaults)
- Waypoint / GeneratedPoint: Input and output value types
- CubicSplinePath, CatmullRomPath, LinearPath: Per-family generators
- export_document / load_document: Saved path documents
"""

from ._version import __version__
from .config import CurvatureSource, PathAlgorithm, PathConfig, SamplingStrategy
from .document import export_document, load_document, nearest_index
from .generate import PATH_ALGORITHMS, generate, get_generator
from .geometry import FlagPoint, GeneratedPoint, Point, Waypoint
from .paths import CatmullRomPath, CubicSplinePath, LinearPath, PathGenerator

__all__ = [
    "__version__",
    "generate",
    "get_generator",
    "PATH_ALGORITHMS",
    "PathConfig",
    "PathAlgorithm",
    "SamplingStrategy",
    "CurvatureSource",
    "Point",
    "Waypoint",
    "GeneratedPoint",
    "FlagPoint",
    "PathGenerator",
    "CubicSplinePath",
    "CatmullRomPath",
    "LinearPath",
    "export_document",
    "load_document",
    "nearest_index",
]
