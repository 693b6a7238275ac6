# File: tests/utils/test_geometry_helpers.py

"""Tests for 2D vector helpers."""

import math

from floorplan_editor.utils.geometry_helpers import (
    cross,
    line_intersection,
    line_intersection_params,
    normalize,
    param_along,
    perpendicular,
    project_to_segment,
)


class TestVectors:
    """Tests for basic vector operations."""

    def test_cross_sign(self):
        assert cross((1.0, 0.0), (0.0, 1.0)) == 1.0
        assert cross((0.0, 1.0), (1.0, 0.0)) == -1.0

    def test_normalize(self):
        unit = normalize((3.0, 4.0))
        assert abs(unit[0] - 0.6) < 1e-9
        assert abs(unit[1] - 0.8) < 1e-9

    def test_normalize_zero(self):
        assert normalize((0.0, 0.0)) is None

    def test_perpendicular_is_ccw(self):
        assert perpendicular((1.0, 0.0)) == (-0.0, 1.0)


class TestLineIntersection:
    """Tests for line_intersection."""

    def test_perpendicular_lines(self):
        point = line_intersection((0.0, 5.0), (1.0, 0.0), (3.0, 0.0), (0.0, 1.0))
        assert abs(point[0] - 3.0) < 1e-9
        assert abs(point[1] - 5.0) < 1e-9

    def test_parallel_lines(self):
        assert line_intersection((0.0, 0.0), (1.0, 0.0), (0.0, 5.0), (1.0, 0.0)) is None

    def test_nearly_parallel_below_epsilon(self):
        d2 = (1.0, 5e-5)
        assert line_intersection((0.0, 0.0), (1.0, 0.0), (0.0, 5.0), d2) is None

    def test_oblique_lines(self):
        s = math.sqrt(0.5)
        point = line_intersection((0.0, 0.0), (s, s), (10.0, 0.0), (-s, s))
        assert abs(point[0] - 5.0) < 1e-9
        assert abs(point[1] - 5.0) < 1e-9

    def test_params(self):
        t, s = line_intersection_params((0.0, 0.0), (1.0, 0.0), (4.0, -2.0), (0.0, 1.0))
        assert abs(t - 4.0) < 1e-9
        assert abs(s - 2.0) < 1e-9


class TestProjection:
    """Tests for project_to_segment and param_along."""

    def test_midpoint(self):
        dist, t = project_to_segment((5.0, 1.0), (0.0, 0.0), (10.0, 0.0))
        assert abs(dist - 1.0) < 1e-9
        assert abs(t - 0.5) < 1e-9

    def test_unclamped_beyond_end(self):
        dist, t = project_to_segment((15.0, 2.0), (0.0, 0.0), (10.0, 0.0))
        assert abs(t - 1.5) < 1e-9
        assert abs(dist - 2.0) < 1e-9

    def test_degenerate_segment(self):
        dist, t = project_to_segment((3.0, 4.0), (0.0, 0.0), (0.0, 0.0))
        assert abs(dist - 5.0) < 1e-9
        assert t == 0.0

    def test_param_along(self):
        assert abs(param_along((25.0, 9.0), (0.0, 0.0), (100.0, 0.0)) - 0.25) < 1e-9
