# File: tests/wall_junctions/conftest.py

"""Shared test fixtures for wall junction tests.

Provides wall configurations for L-corners (same class and mixed class),
T-junctions against exterior and interior hosts, mid-span crossings,
collinear walls and zero-length walls.

Coordinates are drawing units (20 units = 6 inches). Wall thicknesses:
interior 6" = 20 units, exterior 10" = 33.33 units, 8" = 26.67 units.
"""

import math
import pytest
from typing import List, Optional

from floorplan_editor.config.wall_types import get_wall_type_config
from floorplan_editor.wall_junctions.junction_types import Wall, WallGeometry
from floorplan_editor.wall_junctions.wall_geometry import build_wall_geometry


# =============================================================================
# Helpers
# =============================================================================


def make_wall(
    wall_id: str,
    start: tuple,
    end: tuple,
    wall_type: str = "interior",
    flipped: bool = False,
    thickness: Optional[float] = None,
) -> Wall:
    """Create a wall record.

    Args:
        wall_id: Unique wall identifier.
        start: (x, y) start point.
        end: (x, y) end point.
        wall_type: Wall type tag.
        flipped: Mirror the layer stack.
        thickness: Optional thickness override in inches.
    """
    return Wall(
        id=wall_id,
        start=(float(start[0]), float(start[1])),
        end=(float(end[0]), float(end[1])),
        wall_type=wall_type,
        flipped=flipped,
        thickness=thickness,
    )


def make_geometry(wall: Wall, index: int = 0) -> WallGeometry:
    """Build geometry for a wall with its catalog config."""
    return build_wall_geometry(wall, get_wall_type_config(wall.wall_type), index=index)


def points_close(p1, p2, tol: float = 1e-6) -> bool:
    """True if two 2D points are within tol."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1]) < tol


# =============================================================================
# Fixtures: Junction Configurations
# =============================================================================


@pytest.fixture
def exterior_corner_walls() -> List[Wall]:
    """Two 8" exterior walls meeting at a right-angle corner.

    Wall A: (0,0) -> (200,0)
    Wall B: (200,0) -> (200,150), turning left at A's end
    """
    return [
        make_wall("A", (0, 0), (200, 0), "exterior", thickness=8.0),
        make_wall("B", (200, 0), (200, 150), "exterior", thickness=8.0),
    ]


@pytest.fixture
def interior_corner_walls() -> List[Wall]:
    """Two interior walls that both start at (0,0)."""
    return [
        make_wall("A", (0, 0), (200, 0)),
        make_wall("B", (0, 0), (0, 150)),
    ]


@pytest.fixture
def mixed_corner_walls() -> List[Wall]:
    """Exterior wall E ending where interior wall I starts.

    E runs (0,0) -> (200,0) with its drywall on +y. I runs up from the
    corner on the drywall side.
    """
    return [
        make_wall("E", (0, 0), (200, 0), "exterior"),
        make_wall("I", (200, 0), (200, 150), "interior"),
    ]


@pytest.fixture
def exterior_t_walls() -> List[Wall]:
    """Interior wall I starting at the midpoint of exterior host H.

    H: (0,0) -> (300,0), unflipped, drywall on +y
    I: (150,0) -> (150,100)
    """
    return [
        make_wall("H", (0, 0), (300, 0), "exterior"),
        make_wall("I", (150, 0), (150, 100), "interior"),
    ]


@pytest.fixture
def interior_t_walls() -> List[Wall]:
    """Interior wall I ending at the midpoint of interior host H, from below.

    H: (0,0) -> (300,0)
    I: (150,-100) -> (150,0)
    """
    return [
        make_wall("H", (0, 0), (300, 0)),
        make_wall("I", (150, -100), (150, 0)),
    ]


@pytest.fixture
def crossing_walls() -> List[Wall]:
    """Two interior walls crossing at their midpoints.

    M: (0,50) -> (200,50)
    N: (100,0) -> (100,100)
    """
    return [
        make_wall("M", (0, 50), (200, 50)),
        make_wall("N", (100, 0), (100, 100)),
    ]


@pytest.fixture
def collinear_walls() -> List[Wall]:
    """Two interior walls continuing in a straight line."""
    return [
        make_wall("A", (0, 0), (100, 0)),
        make_wall("B", (100, 0), (250, 0)),
    ]


@pytest.fixture
def room_walls() -> List[Wall]:
    """Closed rectangular room of exterior walls plus one partition T."""
    return [
        make_wall("north", (400, 300), (0, 300), "exterior"),
        make_wall("east", (400, 0), (400, 300), "exterior"),
        make_wall("south", (0, 0), (400, 0), "exterior"),
        make_wall("west", (0, 300), (0, 0), "exterior"),
        make_wall("part", (200, 0), (200, 150), "partition"),
    ]
