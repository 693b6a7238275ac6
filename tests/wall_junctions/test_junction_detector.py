# File: tests/wall_junctions/test_junction_detector.py

"""Tests for pairwise wall junction detection.

Tests cover:
- Tolerance helpers
- Endpoint matching (L-corners)
- T-junction detection and the endpoint exclusion band
- Mid-span crossings
- Edge cases (parallel walls, zero-length walls, input order)
"""

import pytest

from floorplan_editor.config.junctions import JunctionTolerances
from floorplan_editor.wall_junctions.junction_detector import (
    canonical_order,
    corner_tolerance,
    detect_junctions,
    detect_pair_junctions,
    t_tolerance,
)
from floorplan_editor.wall_junctions.junction_types import JunctionType, WallEnd
from tests.wall_junctions.conftest import make_wall, make_geometry


def _geometries(walls):
    return [make_geometry(w, index=i) for i, w in enumerate(walls)]


def _types(junctions):
    return [j.junction_type for j in junctions]


# =============================================================================
# Tolerance Helpers
# =============================================================================


class TestTolerances:
    """Tests for corner_tolerance and t_tolerance."""

    def test_corner_tolerance_floor(self):
        a = make_geometry(make_wall("A", (0, 0), (100, 0)))
        b = make_geometry(make_wall("B", (0, 0), (0, 100)))
        # half = 10, 10 + 15 < 40
        assert corner_tolerance(a, b) == 40.0

    def test_corner_tolerance_thick_walls(self):
        a = make_geometry(make_wall("A", (0, 0), (100, 0), thickness=40.0))
        b = make_geometry(make_wall("B", (0, 0), (0, 100)))
        # half = 66.67 + 15
        assert abs(corner_tolerance(a, b) - 81.6667) < 0.001

    def test_t_tolerance(self):
        host = make_geometry(make_wall("H", (0, 0), (300, 0), "exterior"))
        inc = make_geometry(make_wall("I", (150, 0), (150, 100)))
        # (33.33 + 20) / 2 + 15
        assert abs(t_tolerance(inc, host) - 41.6667) < 0.001

    def test_t_tolerance_floor(self):
        host = make_geometry(make_wall("H", (0, 0), (300, 0), "partition"))
        inc = make_geometry(make_wall("I", (150, 0), (150, 100), "partition"))
        assert t_tolerance(inc, host) == 40.0


class TestCanonicalOrder:
    """Tests for canonical_order."""

    def test_sorted_by_wall_id(self):
        geoms = _geometries([
            make_wall("c", (0, 0), (10, 0)),
            make_wall("a", (0, 0), (10, 0)),
            make_wall("b", (0, 0), (10, 0)),
        ])
        assert canonical_order(geoms) == [1, 2, 0]

    def test_skips_missing_geometry(self):
        geoms = _geometries([
            make_wall("a", (0, 0), (10, 0)),
            make_wall("z", (3, 3), (3, 3)),
        ])
        assert canonical_order(geoms) == [0]


# =============================================================================
# L-Corners
# =============================================================================


class TestCornerDetection:
    """Tests for L-corner detection."""

    def test_shared_endpoint(self, exterior_corner_walls):
        junctions = detect_junctions(_geometries(exterior_corner_walls))
        assert _types(junctions) == [JunctionType.L_CORNER]
        j = junctions[0]
        assert j.first == 0 and j.second == 1
        assert j.first_end is WallEnd.END
        assert j.second_end is WallEnd.START
        assert j.point == (200.0, 0.0)

    def test_near_endpoint_within_tolerance(self):
        walls = [
            make_wall("A", (0, 0), (100, 0)),
            make_wall("B", (130, 0), (130, 100)),
        ]
        assert _types(detect_junctions(_geometries(walls))) == [JunctionType.L_CORNER]

    def test_endpoint_outside_tolerance(self):
        walls = [
            make_wall("A", (0, 0), (100, 0)),
            make_wall("B", (145, 0), (145, 100)),
        ]
        assert detect_junctions(_geometries(walls)) == []

    def test_both_starts(self, interior_corner_walls):
        junctions = detect_junctions(_geometries(interior_corner_walls))
        assert len(junctions) == 1
        assert junctions[0].first_end is WallEnd.START
        assert junctions[0].second_end is WallEnd.START

    def test_room_corners(self, room_walls):
        junctions = detect_junctions(_geometries(room_walls))
        types = _types(junctions)
        assert types.count(JunctionType.L_CORNER) == 4
        assert types.count(JunctionType.T_JUNCTION) == 1
        assert types.count(JunctionType.CROSS) == 0


# =============================================================================
# T-Junctions
# =============================================================================


class TestTJunctionDetection:
    """Tests for T-junction detection."""

    def test_endpoint_at_host_midpoint(self, exterior_t_walls):
        junctions = detect_junctions(_geometries(exterior_t_walls))
        assert _types(junctions) == [JunctionType.T_JUNCTION]
        j = junctions[0]
        # Incoming I (index 1) meets host H (index 0)
        assert j.first == 1 and j.second == 0
        assert j.first_end is WallEnd.START
        assert abs(j.host_t - 0.5) < 0.001

    def test_incoming_end(self, interior_t_walls):
        junctions = detect_junctions(_geometries(interior_t_walls))
        assert len(junctions) == 1
        assert junctions[0].first_end is WallEnd.END

    def test_endpoint_short_of_host(self):
        walls = [
            make_wall("H", (0, 0), (300, 0)),
            make_wall("I", (150, 30), (150, 200)),
        ]
        junctions = detect_junctions(_geometries(walls))
        assert _types(junctions) == [JunctionType.T_JUNCTION]

    def test_endpoint_too_far_from_host(self):
        walls = [
            make_wall("H", (0, 0), (300, 0)),
            make_wall("I", (150, 45), (150, 200)),
        ]
        assert detect_junctions(_geometries(walls)) == []

    @pytest.mark.parametrize("x", [100, 4900])
    def test_parameter_on_band_is_not_t(self, x):
        walls = [
            make_wall("H", (0, 0), (5000, 0)),
            make_wall("I", (x, 0), (x, 200)),
        ]
        assert detect_junctions(_geometries(walls)) == []

    @pytest.mark.parametrize("x", [125, 4875])
    def test_parameter_inside_band_is_t(self, x):
        walls = [
            make_wall("H", (0, 0), (5000, 0)),
            make_wall("I", (x, 0), (x, 200)),
        ]
        assert _types(detect_junctions(_geometries(walls))) == [JunctionType.T_JUNCTION]

    def test_custom_band(self):
        walls = [
            make_wall("H", (0, 0), (5000, 0)),
            make_wall("I", (125, 0), (125, 200)),
        ]
        tolerances = JunctionTolerances(t_endpoint_band=0.1)
        assert detect_junctions(_geometries(walls), tolerances) == []


# =============================================================================
# Crossings
# =============================================================================


class TestCrossDetection:
    """Tests for mid-span crossing detection."""

    def test_midspan_crossing(self, crossing_walls):
        junctions = detect_junctions(_geometries(crossing_walls))
        assert _types(junctions) == [JunctionType.CROSS]
        j = junctions[0]
        assert abs(j.host_t - 0.5) < 0.001
        assert abs(j.other_t - 0.5) < 0.001
        assert abs(j.point[0] - 100.0) < 0.001
        assert abs(j.point[1] - 50.0) < 0.001

    def test_crossing_near_end_rejected(self):
        walls = [
            make_wall("M", (0, 50), (1000, 50)),
            make_wall("N", (45, -500), (45, 500)),
        ]
        # t on M = 0.045, inside the crossing band
        assert detect_junctions(_geometries(walls)) == []

    def test_parallel_walls_never_cross(self):
        walls = [
            make_wall("A", (0, 0), (100, 0)),
            make_wall("B", (0, 100), (100, 100)),
        ]
        geoms = _geometries(walls)
        assert detect_pair_junctions(geoms[0], geoms[1]) == []


# =============================================================================
# Edge Cases
# =============================================================================


class TestEdgeCases:
    """Tests for degenerate inputs."""

    def test_no_walls(self):
        assert detect_junctions([]) == []

    def test_single_wall(self):
        assert detect_junctions(_geometries([make_wall("A", (0, 0), (100, 0))])) == []

    def test_zero_length_wall_skipped(self):
        walls = [
            make_wall("A", (0, 0), (100, 0)),
            make_wall("Z", (100, 0), (100, 0)),
        ]
        assert detect_junctions(_geometries(walls)) == []

    def test_input_order_does_not_change_pairs(self, room_walls):
        forward = detect_junctions(_geometries(room_walls))
        reversed_walls = list(reversed(room_walls))
        backward = detect_junctions(_geometries(reversed_walls))

        def described(junctions, walls):
            return [
                (
                    j.junction_type,
                    walls[j.first].id,
                    walls[j.second].id,
                    j.first_end,
                    j.second_end,
                )
                for j in junctions
            ]

        assert described(forward, room_walls) == described(backward, reversed_walls)
