"""
Spatial resampling of curve segments.

Uniform steps in the curve parameter over- or under-sample wherever the curve's
parametric speed varies, so samples are spaced by distance instead: either by
splitting each segment into ceil(length / spacing) parameter steps, or by
inverting a cumulative-distance lookup table.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from pathgen.config import LUT_SAMPLES_PER_SEGMENT, SAMPLE_COUNT_TOLERANCE, SamplingStrategy
from pathgen.curves import CurveEvaluator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathSamples:
    """Sampled positions of one sub-path with their raw curvature and provisional speed."""

    positions: np.ndarray  # (N, 2)
    curvature: np.ndarray  # (N,)
    speed: np.ndarray  # (N,)

    def __len__(self) -> int:
        return int(self.positions.shape[0])

    @classmethod
    def empty(cls) -> PathSamples:
        return cls(np.zeros((0, 2)), np.zeros(0), np.zeros(0))


class CumulativeDistanceLUT:
    """
    Monotonic table of (global parameter, cumulative distance).

    The global parameter of segment ``i`` at local ``t`` is ``i + t``. Distances
    are chord sums over densely injected samples, offset by the length of all
    previous segments.
    """

    def __init__(self, params: np.ndarray, distances: np.ndarray):
        self.params = np.asarray(params, dtype=float)
        self.distances = np.asarray(distances, dtype=float)
        if self.params.shape != self.distances.shape:
            raise ValueError("params and distances must have the same shape")

    def __len__(self) -> int:
        return int(self.params.shape[0])

    @classmethod
    def from_segments(
        cls,
        segments: Sequence[CurveEvaluator],
        samples_per_segment: int = LUT_SAMPLES_PER_SEGMENT,
    ) -> CumulativeDistanceLUT:
        """
        Build the table by injecting ``samples_per_segment`` chords per segment.

        Args:
            segments: Curve segments in path order
            samples_per_segment: Chord count per segment (at least 1)

        Returns:
            Table whose first entry is (0, 0)
        """
        n = max(1, int(samples_per_segment))
        ts = np.linspace(0.0, 1.0, n + 1)
        params: list[np.ndarray] = []
        distances: list[np.ndarray] = []
        offset = 0.0
        for i, segment in enumerate(segments):
            pts = segment.positions(ts)
            chords = np.linalg.norm(np.diff(pts, axis=0), axis=1)
            cum = offset + np.concatenate(([0.0], np.cumsum(chords)))
            # A segment's t=0 entry repeats the previous segment's t=1 entry
            start = 0 if i == 0 else 1
            params.append(i + ts[start:])
            distances.append(cum[start:])
            offset = float(cum[-1])

        if not params:
            return cls(np.zeros(0), np.zeros(0))
        return cls(np.concatenate(params), np.concatenate(distances))

    @property
    def total_length(self) -> float:
        return float(self.distances[-1]) if len(self) else 0.0

    def parameter_at(self, distance: float) -> float:
        """
        Global parameter at ``distance`` along the path.

        Interpolates linearly between the two bracketing entries; distances
        outside the table clamp to its ends.
        """
        if len(self) == 0:
            return 0.0
        if distance <= self.distances[0]:
            return float(self.params[0])
        if distance >= self.distances[-1]:
            return float(self.params[-1])

        # First entry with distance >= target is the upper bracket
        j = int(np.searchsorted(self.distances, distance, side="left"))
        j = int(np.clip(j, 1, len(self) - 1))
        d0, d1 = float(self.distances[j - 1]), float(self.distances[j])
        u0, u1 = float(self.params[j - 1]), float(self.params[j])
        if d1 <= d0:  # Degenerate (zero-length) stretch
            return u1
        alpha = (distance - d0) / (d1 - d0)
        return u0 + alpha * (u1 - u0)


def provisional_speeds(curvature: np.ndarray, max_velocity: float, k: float) -> np.ndarray:
    """
    Curvature-limited speed min(max_velocity, |k / curvature|).

    Zero curvature leaves the speed at ``max_velocity``.
    """
    curvature = np.asarray(curvature, dtype=float)
    speeds = np.full(curvature.shape, float(max_velocity))
    curved = curvature != 0.0
    speeds[curved] = np.minimum(max_velocity, np.abs(k / curvature[curved]))
    return speeds


def _segment_sample_count(length: float, spacing: float) -> int:
    return max(0, math.ceil(length / spacing - SAMPLE_COUNT_TOLERANCE))


def sample_parametric(segments: Sequence[CurveEvaluator], spacing: float) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample ceil(length / spacing) uniform parameter steps per segment.

    The segment end point (t=1) is left to the next segment's t=0 sample.

    Returns:
        (positions (N, 2), raw curvature (N,))
    """
    positions: list[np.ndarray] = []
    curvature: list[float] = []
    for segment in segments:
        count = _segment_sample_count(segment.length(), spacing)
        if count == 0:
            continue
        ts = np.arange(count) / count
        positions.append(segment.positions(ts))
        curvature.extend(segment.curvature(float(t)) for t in ts)

    if not positions:
        return np.zeros((0, 2)), np.zeros(0)
    return np.vstack(positions), np.array(curvature, dtype=float)


def sample_arc_length(
    segments: Sequence[CurveEvaluator],
    spacing: float,
    samples_per_segment: int = LUT_SAMPLES_PER_SEGMENT,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample at equal true distances using a cumulative-distance LUT.

    The spacing is stretched to total / floor(total / spacing) so both path ends
    are hit exactly.

    Returns:
        (positions (N, 2), raw curvature (N,))
    """
    lut = CumulativeDistanceLUT.from_segments(segments, samples_per_segment)
    total = lut.total_length
    if total <= 0.0:
        return np.zeros((0, 2)), np.zeros(0)

    count = max(1, math.floor(total / spacing))
    step = total / count

    positions = np.zeros((count + 1, 2))
    curvature = np.zeros(count + 1)
    last = len(segments) - 1
    for i in range(count + 1):
        u = lut.parameter_at(i * step)
        idx = min(int(math.floor(u)), last)
        t = u - idx
        segment = segments[idx]
        positions[i] = segment.positions(np.array([t]))[0]
        curvature[i] = segment.curvature(t)
    return positions, curvature


def sample_segments(
    segments: Sequence[CurveEvaluator],
    spacing: float,
    max_velocity: float,
    k: float,
    strategy: SamplingStrategy = SamplingStrategy.PARAMETRIC,
) -> PathSamples:
    """
    Resample one sub-path and attach provisional speeds.

    Args:
        segments: Curve segments of the sub-path
        spacing: Target distance between samples
        max_velocity: Speed cap
        k: Cornering constant
        strategy: Parameter selection strategy

    Returns:
        PathSamples (empty when the segments have no length)
    """
    if not segments:
        return PathSamples.empty()

    if strategy == SamplingStrategy.ARC_LENGTH:
        positions, curvature = sample_arc_length(segments, spacing)
    else:
        positions, curvature = sample_parametric(segments, spacing)

    logger.debug(f"Sampled {len(segments)} segment(s) into {len(positions)} point(s) ({strategy.value})")
    return PathSamples(positions, curvature, provisional_speeds(curvature, max_velocity, k))
