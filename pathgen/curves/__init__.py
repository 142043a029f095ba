from .base import CurveEvaluator
from .bezier import CubicBezier
from .catmull_rom import CatmullRomSegment, catmull_rom_chain
from .linear import LinearSegment

__all__ = [
    "CurveEvaluator",
    "CubicBezier",
    "CatmullRomSegment",
    "LinearSegment",
    "catmull_rom_chain",
]
