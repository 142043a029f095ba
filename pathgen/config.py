"""
Central configuration for path generation tunables and shared constants.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Mapping

from pathgen.utils.errors import ConfigurationError

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("PATHGEN_TRACE", "0")).lower() in ("1", "true", "yes", "on")
if TRACE_ENABLED:
    logging.getLogger("pathgen").setLevel(TRACE)

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


# Robot limits (field units per second, field units per second^2)
MAX_VELOCITY: float = _env_float("PATHGEN_MAX_VELOCITY", 24.0)
MAX_ACCELERATION: float = _env_float("PATHGEN_MAX_ACCELERATION", 12.0)

# Cornering constant: speed through a turn is bounded by k / |curvature|
CORNERING_CONSTANT: float = _env_float("PATHGEN_K", 3.0)

# Target distance between generated points (field units)
SPACING: float = _env_float("PATHGEN_SPACING", 0.5)

# Simpson's rule subdivisions for segment arc length (rounded up to even)
SIMPSON_INTERVALS: int = _env_int("PATHGEN_SIMPSON_INTERVALS", 100)

# Chord samples injected per segment when building a cumulative-distance LUT
LUT_SAMPLES_PER_SEGMENT: int = _env_int("PATHGEN_LUT_SAMPLES", 50)

# Absorbs Simpson round-off when converting a length into a sample count
SAMPLE_COUNT_TOLERANCE: float = 1e-9

# Document format
DOCUMENT_VERSION: str = "1.0.0"
EXPORT_SCALE: int = 100


class PathAlgorithm(str, Enum):
    """Curve family used to build the path."""

    CUBIC_SPLINE = "cubic-spline"
    CATMULL_ROM = "catmull-rom"
    LINEAR = "linear"


class SamplingStrategy(str, Enum):
    """How sample parameters are chosen along each segment."""

    PARAMETRIC = "parametric"  # ceil(L / spacing) uniform steps in t per segment
    ARC_LENGTH = "arc-length"  # true distance -> t inversion through a LUT


class CurvatureSource(str, Enum):
    """Where the curvature used for angular velocity comes from."""

    ANALYTIC = "analytic"
    DISCRETE = "discrete"


def _parse_enum(enum_cls: type[Enum], value: Any, key: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(str(m.value) for m in enum_cls)
        raise ConfigurationError(f"{key}={value!r} is not one of: {choices}") from None


@dataclass(frozen=True)
class PathConfig:
    """Robot limits and generation options for one generation call."""

    max_velocity: float = MAX_VELOCITY
    max_acceleration: float = MAX_ACCELERATION
    k: float = CORNERING_CONSTANT
    spacing: float = SPACING
    algorithm: PathAlgorithm = PathAlgorithm.CUBIC_SPLINE
    sampling: SamplingStrategy = SamplingStrategy.PARAMETRIC
    curvature_source: CurvatureSource | None = None  # None: family default

    @property
    def is_valid(self) -> bool:
        """True when spacing, both robot limits and k are finite and positive."""
        return all(
            math.isfinite(v) and v > 0
            for v in (self.spacing, self.max_velocity, self.max_acceleration, self.k)
        )

    def with_overrides(self, **overrides: Any) -> PathConfig:
        """Return a copy with the non-None overrides applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        for key, enum_cls in (
            ("algorithm", PathAlgorithm),
            ("sampling", SamplingStrategy),
            ("curvature_source", CurvatureSource),
        ):
            if key in changes:
                changes[key] = _parse_enum(enum_cls, changes[key], key)
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PathConfig:
        """
        Build a config from a mapping.

        Accepts the document layout (``distanceBetween``, ``k``, ``algorithm`` and
        a ``bot`` block with ``maxVelocity``/``maxAcceleration``) as well as the
        snake_case field names. Missing keys keep their defaults; unknown keys
        are ignored.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"config must be a mapping, got {type(data).__name__}")
        bot = data.get("bot") or {}
        if not isinstance(bot, Mapping):
            raise ConfigurationError(f"bot must be a mapping, got {type(bot).__name__}")
        values: dict[str, Any] = {
            "max_velocity": data.get("max_velocity", bot.get("maxVelocity")),
            "max_acceleration": data.get("max_acceleration", bot.get("maxAcceleration")),
            "k": data.get("k"),
            "spacing": data.get("spacing", data.get("distanceBetween")),
            "algorithm": data.get("algorithm"),
            "sampling": data.get("sampling"),
            "curvature_source": data.get("curvature_source", data.get("curvatureSource")),
        }
        for key in ("max_velocity", "max_acceleration", "k", "spacing"):
            if values[key] is not None:
                try:
                    values[key] = float(values[key])
                except (TypeError, ValueError):
                    raise ConfigurationError(f"{key}={values[key]!r} is not a number") from None
        return cls().with_overrides(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the document layout."""
        raw = asdict(self)
        return {
            "algorithm": self.algorithm.value,
            "distanceBetween": raw["spacing"],
            "k": raw["k"],
            "sampling": self.sampling.value,
            "curvatureSource": None if self.curvature_source is None else self.curvature_source.value,
            "bot": {
                "maxVelocity": raw["max_velocity"],
                "maxAcceleration": raw["max_acceleration"],
            },
        }
