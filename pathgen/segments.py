"""
Split authored waypoints into independently profiled sub-paths.

A reverse flag on an interior waypoint is a hard cut: the sub-path before it
ends on its anchor, the sub-path after it starts there, and no curve spans the
cusp.
"""

from __future__ import annotations

from collections.abc import Sequence

from pathgen.geometry import Point, Waypoint

ControlGroup = tuple[Point, Point, Point, Point]


def section(points: Sequence[Point]) -> list[ControlGroup]:
    """Group a flat control-point run (anchor, h, h, anchor, h, h, anchor...) into cubic spans."""
    return [
        (points[i - 3], points[i - 2], points[i - 1], points[i])
        for i in range(3, len(points), 3)
    ]


def control_runs(waypoints: Sequence[Waypoint]) -> list[list[Point]]:
    """
    Flat control-point runs, one per sub-path.

    Each run is anchor, exit handle, then for every following waypoint its entry
    handle, anchor and (unless the run ends there) exit handle. A reversing
    waypoint's exit handle belongs to the run it starts.
    """
    if len(waypoints) < 2:
        return []

    first, last = waypoints[0], waypoints[-1]
    runs: list[list[Point]] = [[first.position, first.exit]]
    for wp in waypoints[1:-1]:
        runs[-1].extend([wp.entry, wp.position])
        if wp.reverse:
            runs.append([wp.position, wp.exit])
        else:
            runs[-1].append(wp.exit)
    runs[-1].extend([last.entry, last.position])
    return runs


def build_subpaths(waypoints: Sequence[Waypoint]) -> list[list[ControlGroup]]:
    """
    Cubic control groups for each sub-path.

    Returns:
        One list of (anchor, exit, next entry, next anchor) groups per sub-path;
        an empty list when there are fewer than 2 waypoints
    """
    return [section(run) for run in control_runs(waypoints)]


def split_anchor_runs(waypoints: Sequence[Waypoint]) -> list[list[Point]]:
    """Anchor positions per sub-path, cut at interior reverse waypoints."""
    if len(waypoints) < 2:
        return []

    runs: list[list[Point]] = [[waypoints[0].position]]
    for wp in waypoints[1:-1]:
        runs[-1].append(wp.position)
        if wp.reverse:
            runs.append([wp.position])
    runs[-1].append(waypoints[-1].position)
    return runs
