"""
End-to-end tests for the generation pipeline across curve families.
"""

import logging
import math

import numpy as np
import pytest

from pathgen import generate, get_generator
from pathgen.config import CurvatureSource, PathAlgorithm, PathConfig, SamplingStrategy
from pathgen.geometry import Point, Waypoint
from pathgen.paths import CatmullRomPath, CubicSplinePath, LinearPath


def _speeds(points):
    return np.array([p.speed for p in points])


def _times(points):
    return np.array([p.time for p in points])


@pytest.mark.parametrize("algorithm", list(PathAlgorithm))
def test_fewer_than_two_waypoints_generate_nothing(config, algorithm):
    cfg = config.with_overrides(algorithm=algorithm)
    assert generate([], cfg) == []
    assert generate([Waypoint(1.0, 1.0)], cfg) == []


class TestCubicSpline:
    def test_straight_line_worked_example(self, config, straight_path):
        points = generate(straight_path, config)

        assert len(points) == 20
        assert [p.x for p in points] == pytest.approx([0.5 * j for j in range(20)])
        assert all(p.y == pytest.approx(0.0) for p in points)

        expected = np.array([math.sqrt(12.0 * min(j, 19 - j)) for j in range(20)])
        assert _speeds(points) == pytest.approx(expected)
        assert max(_speeds(points)) == pytest.approx(math.sqrt(108.0))
        assert all(p.angular_velocity == 0.0 for p in points)

        steps = [0.5 if v == 0.0 else 0.5 / v for v in expected[:-1]]
        assert _times(points) == pytest.approx(np.concatenate(([0.0], np.cumsum(steps))))

    def test_generation_is_deterministic(self, config, quarter_path):
        assert generate(quarter_path, config) == generate(quarter_path, config)

    def test_reversal_splits_and_negates_second_leg(self, config, reversal_path):
        points = generate(reversal_path, config)

        assert len(points) == 20 + 19
        speeds = _speeds(points)
        assert np.all(speeds[:20] >= 0)
        assert np.all(speeds[20:] <= 0)
        assert np.any(speeds[20:] < 0)
        assert np.all(np.diff(_times(points)) > 0)
        # Second leg runs up the y axis at x=10
        assert all(p.x == pytest.approx(10.0) for p in points[20:])

    def test_first_waypoint_reverse_drives_backwards(self, config, straight_path):
        wps = list(straight_path)
        wps[0] = Waypoint(0.0, 0.0, exit_handle=wps[0].exit_handle, reverse=True)
        points = generate(wps, config)
        assert len(points) == 20
        assert np.all(_speeds(points) <= 0)
        assert min(_speeds(points)) == pytest.approx(-math.sqrt(108.0))

    def test_tighter_cornering_constant_lowers_peak_speed(self, config, quarter_path):
        gentle = generate(quarter_path, config, k=100.0)
        tight = generate(quarter_path, config, k=1.0)
        assert len(gentle) == len(tight)
        assert max(_speeds(tight)) < max(_speeds(gentle))
        # Radius 10 turn caps speed near k * radius
        assert max(_speeds(tight)) <= 10.5

    def test_ends_at_rest_with_bounded_acceleration(self, config, quarter_path):
        points = generate(quarter_path, config)
        speeds = _speeds(points)
        assert speeds[0] == 0.0
        assert speeds[-1] == 0.0
        assert np.all(speeds <= config.max_velocity)
        xy = np.array([[p.x, p.y] for p in points])
        gaps = np.linalg.norm(np.diff(xy, axis=0), axis=1)
        assert np.all(np.abs(np.diff(speeds**2)) <= 2 * config.max_acceleration * gaps + 1e-9)

    def test_quarter_turn_angular_velocity_follows_curvature(self, config, quarter_path):
        points = generate(quarter_path, config)
        mid = points[len(points) // 2]
        assert mid.speed > 0
        assert mid.angular_velocity / mid.speed == pytest.approx(0.1, rel=0.05)

    def test_arc_length_sampling_includes_final_anchor(self, config, straight_path):
        cfg = config.with_overrides(sampling=SamplingStrategy.ARC_LENGTH, spacing=0.3)
        points = generate(straight_path, cfg)
        assert len(points) == 34
        assert points[0].x == pytest.approx(0.0)
        assert points[-1].x == pytest.approx(10.0)
        assert points[-1].speed == 0.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"spacing": 0.0},
        {"spacing": -0.5},
        {"max_velocity": 0.0},
        {"max_acceleration": -1.0},
        {"max_acceleration": float("nan")},
        {"k": float("nan")},
        {"k": float("inf")},
        {"k": 0.0},
    ],
)
def test_invalid_config_yields_empty_with_warning(config, straight_path, caplog, overrides):
    cfg = config.with_overrides(**overrides)
    with caplog.at_level(logging.WARNING, logger="pathgen"):
        assert generate(straight_path, cfg) == []
    assert "Skipping generation" in caplog.text


@pytest.mark.parametrize("k", [float("nan"), float("inf"), -1.0])
def test_invalid_cornering_argument_yields_empty(config, quarter_path, caplog, k):
    with caplog.at_level(logging.WARNING, logger="pathgen"):
        assert generate(quarter_path, config, k=k) == []
    assert "Skipping generation" in caplog.text


def test_output_is_always_finite(config, quarter_path, reversal_path):
    for wps in (quarter_path, reversal_path):
        for p in generate(wps, config, k=0.5):
            assert all(math.isfinite(v) for v in (p.x, p.y, p.time, p.speed, p.angular_velocity))


def test_zero_length_leading_subpath_starts_at_rest(config):
    third = 10.0 / 3.0
    wps = [
        Waypoint(0.0, 0.0),
        Waypoint(0.0, 0.0, exit_handle=Point(third, 0.0), reverse=True),
        Waypoint(10.0, 0.0, entry_handle=Point(-third, 0.0)),
    ]
    points = generate(wps, config)
    assert len(points) == 20
    assert points[0].x == 0.0
    assert points[0].time == 0.0
    assert points[0].speed == 0.0
    assert np.all(_speeds(points) <= 0)
    assert min(_speeds(points)) == pytest.approx(-math.sqrt(108.0))


class TestCatmullRom:
    def test_two_anchors_make_a_straight_leg(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.CATMULL_ROM)
        points = generate([Waypoint(0.0, 0.0), Waypoint(10.0, 0.0)], cfg)
        assert len(points) == 20
        assert all(p.angular_velocity == 0.0 for p in points)
        assert points[0].speed == 0.0
        assert points[-1].speed == 0.0

    def test_curve_passes_the_corner_turning_left(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.CATMULL_ROM)
        wps = [Waypoint(0.0, 0.0), Waypoint(10.0, 0.0), Waypoint(10.0, 10.0)]
        points = generate(wps, cfg)
        assert len(points) > 20
        xy = np.array([[p.x, p.y] for p in points])
        assert np.min(np.hypot(xy[:, 0] - 10.0, xy[:, 1])) < 0.5
        assert max(p.angular_velocity for p in points) > 0
        assert np.all(_speeds(points) >= 0)

    def test_handles_are_ignored(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.CATMULL_ROM)
        plain = [Waypoint(0.0, 0.0), Waypoint(5.0, 5.0), Waypoint(10.0, 0.0)]
        handled = [Waypoint(w.x, w.y, Point(-3.0, 1.0), Point(3.0, -1.0)) for w in plain]
        assert generate(plain, cfg) == generate(handled, cfg)

    def test_reversal_cuts_anchor_runs(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.CATMULL_ROM)
        wps = [Waypoint(0.0, 0.0), Waypoint(10.0, 0.0, reverse=True), Waypoint(10.0, 10.0)]
        points = generate(wps, cfg)
        assert len(points) == 39
        assert np.all(_speeds(points)[20:] <= 0)


class TestLinear:
    def test_one_point_per_waypoint(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.LINEAR)
        wps = [Waypoint(0.0, 0.0), Waypoint(5.0, 0.0), Waypoint(5.0, 5.0, reverse=True), Waypoint(0.0, 5.0)]
        points = generate(wps, cfg)
        assert [(p.x, p.y) for p in points] == [(w.x, w.y) for w in wps]
        assert [p.time for p in points] == [0.0, 1.0, 2.0, 3.0]
        assert [p.speed for p in points] == [0.0, 24.0, -24.0, 0.0]
        assert all(p.angular_velocity == 0.0 for p in points)

    def test_initial_direction_from_first_waypoint(self, config):
        cfg = config.with_overrides(algorithm=PathAlgorithm.LINEAR)
        wps = [Waypoint(0.0, 0.0, reverse=True), Waypoint(5.0, 0.0), Waypoint(9.0, 0.0)]
        assert [p.speed for p in generate(wps, cfg)] == [0.0, -24.0, 0.0]

    def test_two_waypoints_are_both_at_rest(self, config, straight_path):
        cfg = config.with_overrides(algorithm=PathAlgorithm.LINEAR)
        points = generate(straight_path, cfg)
        assert [p.speed for p in points] == [0.0, 0.0]


class TestGeneratorSelection:
    @pytest.mark.parametrize(
        "algorithm, cls",
        [
            (PathAlgorithm.CUBIC_SPLINE, CubicSplinePath),
            (PathAlgorithm.CATMULL_ROM, CatmullRomPath),
            (PathAlgorithm.LINEAR, LinearPath),
        ],
    )
    def test_get_generator(self, config, algorithm, cls):
        generator = get_generator(config.with_overrides(algorithm=algorithm))
        assert isinstance(generator, cls)

    def test_family_curvature_defaults_and_override(self, config):
        assert CubicSplinePath(config).curvature_source == CurvatureSource.ANALYTIC
        assert CatmullRomPath(config).curvature_source == CurvatureSource.DISCRETE
        cfg = config.with_overrides(curvature_source="analytic")
        assert CatmullRomPath(cfg).curvature_source == CurvatureSource.ANALYTIC

    def test_discrete_curvature_override_on_spline(self, config, quarter_path):
        cfg = config.with_overrides(curvature_source=CurvatureSource.DISCRETE)
        points = generate(quarter_path, cfg)
        mid = points[len(points) // 2]
        assert mid.angular_velocity / mid.speed == pytest.approx(0.1, rel=0.05)

    def test_default_config_is_used_when_none(self, straight_path):
        generator = get_generator(None)
        assert isinstance(generator, CubicSplinePath)
        assert isinstance(generator.config, PathConfig)
