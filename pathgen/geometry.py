"""
Value types exchanged by the path generator.

Point is the 2D vector type used everywhere in the pipeline. Waypoint is the
authored input; GeneratedPoint is the only output type.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point / vector."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    @staticmethod
    def lerp(a: Point, b: Point, t: float) -> Point:
        """Linear interpolation from a (t=0) to b (t=1)."""
        return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Point:
        return cls(float(arr[0]), float(arr[1]))


ORIGIN = Point(0.0, 0.0)


def _handle_from(raw: Any) -> Point:
    """Accept {dx, dy}, {x, y} or a 2-sequence as a handle offset."""
    if raw is None:
        return ORIGIN
    if isinstance(raw, Mapping):
        if "dx" in raw or "dy" in raw:
            return Point(float(raw.get("dx", 0.0)), float(raw.get("dy", 0.0)))
        return Point(float(raw.get("x", 0.0)), float(raw.get("y", 0.0)))
    return Point(float(raw[0]), float(raw[1]))


@dataclass(frozen=True)
class Waypoint:
    """
    An authored anchor with tangent handles.

    Handles are offsets from the anchor. ``reverse`` on an interior waypoint cuts
    the path there and flips the direction of travel for what follows; on the
    first waypoint it selects the initial direction.
    """

    x: float
    y: float
    entry_handle: Point = ORIGIN
    exit_handle: Point = ORIGIN
    reverse: bool = False
    flags: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def entry(self) -> Point:
        """Absolute position of the entry handle."""
        return self.position + self.entry_handle

    @property
    def exit(self) -> Point:
        """Absolute position of the exit handle."""
        return self.position + self.exit_handle

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Waypoint:
        """
        Build a waypoint from either input layout.

        Args:
            data: ``{x, y, entryHandle: {dx, dy}, exitHandle: {dx, dy}, reverse}``
                or the document layout ``{x, y, handles: [{x, y}, {x, y}], reverse}``

        Returns:
            Waypoint
        """
        handles = data.get("handles")
        if handles is not None:
            entry = _handle_from(handles[0]) if len(handles) > 0 else ORIGIN
            exit_ = _handle_from(handles[1]) if len(handles) > 1 else ORIGIN
        else:
            entry = _handle_from(data.get("entryHandle", data.get("entry_handle")))
            exit_ = _handle_from(data.get("exitHandle", data.get("exit_handle")))
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            entry_handle=entry,
            exit_handle=exit_,
            reverse=bool(data.get("reverse", False)),
            flags=dict(data.get("flags") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "entryHandle": {"dx": self.entry_handle.x, "dy": self.entry_handle.y},
            "exitHandle": {"dx": self.exit_handle.x, "dy": self.exit_handle.y},
            "reverse": self.reverse,
            "flags": dict(self.flags),
        }


@dataclass(frozen=True)
class GeneratedPoint:
    """One timed sample of the generated motion profile."""

    x: float
    y: float
    time: float
    speed: float  # signed; negative while driving in reverse
    angular_velocity: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {
            "x": self.x,
            "y": self.y,
            "time": self.time,
            "speed": self.speed,
            "angularVelocity": self.angular_velocity,
        }


@dataclass(frozen=True)
class FlagPoint:
    """Auxiliary marker attached to a generated point by index."""

    index: int
    flags: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlagPoint:
        return cls(index=int(data["index"]), flags=dict(data.get("flags") or {}))

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "flags": dict(self.flags)}
