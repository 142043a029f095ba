"""
Join independently profiled sub-paths into one timed sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from pathgen.geometry import GeneratedPoint


def stitch(subpaths: Sequence[Sequence[GeneratedPoint]], start_reversed: bool = False) -> list[GeneratedPoint]:
    """
    Concatenate sub-paths separated by reversal cuts.

    Direction starts at ``start_reversed`` and flips at every cut; speeds of
    reversed sub-paths are negated. Once something has been emitted, each
    further sub-path loses its first sample (it duplicates the cut point) and
    has its times shifted by the last time emitted so far. Empty sub-paths
    still flip the direction.

    Args:
        subpaths: Generated points per sub-path, each timed from 0
        start_reversed: Whether the first sub-path is driven in reverse

    Returns:
        Flat list with non-decreasing time
    """
    result: list[GeneratedPoint] = []
    reverse = not start_reversed
    elapsed = 0.0

    for points in subpaths:
        reverse = not reverse
        if result:
            points = points[1:]
        sign = -1.0 if reverse else 1.0
        result.extend(replace(p, time=p.time + elapsed, speed=sign * p.speed) for p in points)
        if result:
            elapsed = result[-1].time

    return result
