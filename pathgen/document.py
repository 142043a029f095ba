"""
Saved path documents.

A document holds the config, the authored waypoints, auxiliary flag markers and
the generated sequence (scaled by EXPORT_SCALE and rounded to integers), tagged
with the format version.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Mapping

import numpy as np

from pathgen.config import DOCUMENT_VERSION, EXPORT_SCALE, PathConfig
from pathgen.geometry import FlagPoint, GeneratedPoint, Waypoint
from pathgen.utils.errors import ConfigurationError, PathDocumentError

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("config", "points", "version")


def nearest_index(generated: Sequence[GeneratedPoint], x: float, y: float) -> int | None:
    """Index of the generated point closest to (x, y); None for an empty sequence."""
    if not generated:
        return None
    xy = np.array([[p.x, p.y] for p in generated], dtype=float)
    return int(np.argmin(np.hypot(xy[:, 0] - x, xy[:, 1] - y)))


def _scaled(value: float) -> int:
    """Scale by EXPORT_SCALE and round half up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value * EXPORT_SCALE + 0.5))


def annotate(
    generated: Sequence[GeneratedPoint],
    waypoints: Sequence[Waypoint] = (),
    flag_points: Sequence[FlagPoint] = (),
) -> list[dict[str, Any]]:
    """
    Scaled export rows with flags attached.

    Each waypoint's flags go to its nearest generated point; flag points then
    attach by index (indices past the end are skipped).
    """
    rows: list[dict[str, Any]] = [
        {
            "x": _scaled(p.x),
            "y": _scaled(p.y),
            "time": _scaled(p.time),
            "speed": _scaled(p.speed),
            "angular": _scaled(p.angular_velocity),
            "flags": {},
        }
        for p in generated
    ]

    for wp in waypoints:
        idx = nearest_index(generated, wp.x, wp.y)
        if idx is not None:
            rows[idx]["flags"] = dict(wp.flags)

    for flag_point in flag_points:
        if 0 <= flag_point.index < len(rows):
            rows[flag_point.index]["flags"] = dict(flag_point.flags)

    return rows


def export_document(
    waypoints: Sequence[Waypoint],
    config: PathConfig,
    generated: Sequence[GeneratedPoint],
    flag_points: Sequence[FlagPoint] = (),
) -> dict[str, Any]:
    """Build a saveable document from the current path state."""
    return {
        "config": config.to_dict(),
        "points": [wp.to_dict() for wp in waypoints],
        "flagPoints": [fp.to_dict() for fp in flag_points],
        "generated": annotate(generated, waypoints, flag_points),
        "version": DOCUMENT_VERSION,
    }


def load_document(data: Any) -> tuple[list[Waypoint], PathConfig, list[FlagPoint]]:
    """
    Parse a document into waypoints, config and flag points.

    The stored ``generated`` block is ignored; callers regenerate.

    Raises:
        PathDocumentError: a required section is missing or malformed
    """
    if not isinstance(data, Mapping):
        raise PathDocumentError(f"document must be a JSON object, got {type(data).__name__}")

    missing = [key for key in REQUIRED_SECTIONS if data.get(key) in (None, "")]
    if missing:
        raise PathDocumentError(f"missing section(s): {', '.join(missing)}")
    if not isinstance(data["config"], Mapping):
        raise PathDocumentError(f"config must be an object, got {type(data['config']).__name__}")
    for key in ("points", "flagPoints"):
        if not isinstance(data.get(key) or [], list):
            raise PathDocumentError(f"{key} must be a list, got {type(data[key]).__name__}")

    version = data["version"]
    if version != DOCUMENT_VERSION:
        logger.warning(
            f"Document was written by format {version}, this is {DOCUMENT_VERSION}; "
            f"some features may not load as expected"
        )

    entries = list(data["points"]) + list(data.get("flagPoints") or [])
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise PathDocumentError(f"malformed point entry: expected an object, got {entry!r}")

    try:
        waypoints = [Waypoint.from_dict(p) for p in data["points"]]
        flag_points = [FlagPoint.from_dict(f) for f in data.get("flagPoints") or []]
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        raise PathDocumentError(f"malformed point entry: {e}") from e

    try:
        config = PathConfig.from_dict(data["config"])
    except ConfigurationError as e:
        raise PathDocumentError(f"bad config: {e.original_message}") from e

    return waypoints, config, flag_points


def read_document(path: str | Path) -> Any:
    """Read a JSON document from disk."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise PathDocumentError(f"{path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise PathDocumentError(f"{path} is not valid JSON: {e}") from e


def write_document(path: str | Path, document: Mapping[str, Any]) -> None:
    """Write a JSON document, creating parent directories as needed."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(document, indent=2))
    logger.info(f"Wrote {len(document.get('generated', []))} generated points to {out}")
