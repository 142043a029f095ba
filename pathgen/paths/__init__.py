from .base import PathGenerator
from .catmull_rom import CatmullRomPath
from .cubic_spline import CubicSplinePath
from .linear import LinearPath

__all__ = [
    "PathGenerator",
    "CubicSplinePath",
    "CatmullRomPath",
    "LinearPath",
]
