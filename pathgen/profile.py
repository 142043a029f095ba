"""
Kinematic velocity profile for one sub-path.

Stages run in a fixed order, each taking complete arrays and returning new ones:
deceleration limit, acceleration limit, time integration, angular velocity.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from pathgen.config import TRACE, CurvatureSource
from pathgen.geometry import GeneratedPoint
from pathgen.sampling import PathSamples

logger = logging.getLogger(__name__)


def _gaps(positions: np.ndarray) -> np.ndarray:
    """Euclidean distance between consecutive samples; shape (N-1,)."""
    if len(positions) < 2:
        return np.zeros(0)
    return np.linalg.norm(np.diff(positions, axis=0), axis=1)


def decelerate(positions: np.ndarray, speeds: np.ndarray, max_acceleration: float) -> np.ndarray:
    """
    Backward pass: every sample must be able to brake to the next one.

    The last sample is forced to rest.
    """
    out = np.array(speeds, dtype=float)
    if out.size == 0:
        return out
    gaps = _gaps(positions)
    a = max(0.0, float(max_acceleration))
    out[-1] = 0.0
    for i in range(len(out) - 2, -1, -1):
        out[i] = min(out[i], math.sqrt(2 * a * gaps[i] + out[i + 1] ** 2))
    return out


def accelerate(positions: np.ndarray, speeds: np.ndarray, max_acceleration: float) -> np.ndarray:
    """
    Forward pass: every sample must be reachable from the previous one.

    The first sample is forced to rest. Run after ``decelerate`` so each speed
    satisfies both limits.
    """
    out = np.array(speeds, dtype=float)
    if out.size == 0:
        return out
    gaps = _gaps(positions)
    a = max(0.0, float(max_acceleration))
    out[0] = 0.0
    for i in range(1, len(out)):
        out[i] = min(out[i], math.sqrt(2 * a * gaps[i - 1] + out[i - 1] ** 2))
    return out


def integrate_time(positions: np.ndarray, speeds: np.ndarray) -> np.ndarray:
    """
    Cumulative arrival time at each sample.

    Each step is distance / previous speed; a previous speed of exactly 0 uses
    the raw distance as the step instead.
    """
    n = len(speeds)
    if n == 0:
        return np.zeros(0)
    gaps = _gaps(positions)
    prev = np.asarray(speeds[:-1], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        steps = np.where(prev == 0.0, gaps, gaps / np.where(prev == 0.0, 1.0, prev))
    return np.concatenate(([0.0], np.cumsum(steps)))


def _fill_nearest(values: np.ndarray) -> np.ndarray:
    """Replace non-finite entries with the nearest finite one (0 when there is none)."""
    finite = np.flatnonzero(np.isfinite(values))
    if finite.size == 0:
        return np.zeros_like(values)
    idx = np.arange(len(values))
    right = np.clip(np.searchsorted(finite, idx), 0, finite.size - 1)
    left = np.clip(right - 1, 0, finite.size - 1)
    take_left = np.abs(idx - finite[left]) <= np.abs(finite[right] - idx)
    return values[np.where(take_left, finite[left], finite[right])]


def discrete_curvature(positions: np.ndarray) -> np.ndarray:
    """
    Geometric curvature from consecutive chords.

    Interior samples use the signed turning angle between the two unit chords
    divided by their mean length. Endpoints copy their interior neighbour;
    samples next to a zero-length chord take the nearest valid value.
    """
    n = len(positions)
    if n < 3:
        return np.zeros(n)

    chords = np.diff(positions, axis=0)
    lengths = np.linalg.norm(chords, axis=1)
    la, lb = lengths[:-1], lengths[1:]
    valid = (la > 0) & (lb > 0)

    with np.errstate(divide="ignore", invalid="ignore"):
        ua = chords[:-1] / la[:, None]
        ub = chords[1:] / lb[:, None]
        cross = ua[:, 0] * ub[:, 1] - ua[:, 1] * ub[:, 0]
        dot = np.sum(ua * ub, axis=1)
        interior = np.arctan2(cross, dot) / (0.5 * (la + lb))

    kappa = np.full(n, np.nan)
    kappa[1:-1] = np.where(valid, interior, np.nan)
    kappa[0] = kappa[1]
    kappa[-1] = kappa[-2]
    return _fill_nearest(kappa)


def smooth(values: np.ndarray) -> np.ndarray:
    """One pass of a 3-point moving average with edge padding."""
    values = np.asarray(values, dtype=float)
    if values.size < 3:
        return values.copy()
    padded = np.pad(values, 1, mode="edge")
    return np.convolve(padded, np.ones(3) / 3.0, mode="valid")


def resolve_curvature(samples: PathSamples, source: CurvatureSource) -> np.ndarray:
    """Curvature used for angular velocity, from the selected source."""
    if source == CurvatureSource.DISCRETE:
        return smooth(discrete_curvature(samples.positions))
    return _fill_nearest(np.array(samples.curvature, dtype=float))


@dataclass(frozen=True)
class VelocityProfile:
    """Fully resolved arrays for one sub-path."""

    positions: np.ndarray
    curvature: np.ndarray
    speed: np.ndarray
    time: np.ndarray
    angular_velocity: np.ndarray

    def __len__(self) -> int:
        return int(self.positions.shape[0])

    def points(self) -> list[GeneratedPoint]:
        return [
            GeneratedPoint(
                x=float(p[0]),
                y=float(p[1]),
                time=float(t),
                speed=float(v),
                angular_velocity=float(w),
            )
            for p, t, v, w in zip(self.positions, self.time, self.speed, self.angular_velocity)
        ]


def build_profile(
    samples: PathSamples,
    max_acceleration: float,
    source: CurvatureSource = CurvatureSource.ANALYTIC,
) -> VelocityProfile:
    """
    Run the full profile pipeline over one sub-path.

    Args:
        samples: Resampled sub-path with provisional speeds
        max_acceleration: Longitudinal acceleration limit
        source: Curvature source for angular velocity

    Returns:
        VelocityProfile with speed 0 at both ends
    """
    positions = samples.positions
    speed = decelerate(positions, samples.speed, max_acceleration)
    speed = accelerate(positions, speed, max_acceleration)
    time = integrate_time(positions, speed)
    curvature = resolve_curvature(samples, source)
    angular = curvature * speed

    if len(speed) and logger.isEnabledFor(TRACE):
        logger.trace(  # type: ignore[attr-defined]
            f"Profile: {len(speed)} pts, peak speed {float(np.max(speed)):.3f}, "
            f"duration {float(time[-1]):.3f}s ({source.value} curvature)"
        )
    return VelocityProfile(positions, curvature, speed, time, angular)
