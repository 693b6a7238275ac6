# File: src/floorplan_editor/wall_junctions/wall_geometry.py

"""Wall geometry construction.

Derives the local frame of a wall (direction, perpendicular), its four edge
corners and its finish lines from the wall record and its wall-type
configuration. Geometry is a pure function of its inputs and is rebuilt on
every trim computation.

The layer stack of a WallTypeConfig runs from the exterior face to the
interior face. For an unflipped wall the first layer sits on the RIGHT side
(negative perpendicular) and the last layer on the LEFT side.
"""

import logging
from typing import List, Optional, Tuple

from floorplan_editor.config.units import inches_to_drawing_units
from floorplan_editor.utils.geometry_helpers import (
    distance,
    normalize,
    offset_point,
    perpendicular,
    sub,
)
from .junction_types import (
    LayerKind,
    Wall,
    WallGeometry,
    WallTypeConfig,
)

logger = logging.getLogger(__name__)

MIN_WALL_LENGTH = 1e-9


# =============================================================================
# Layer Stack Offsets
# =============================================================================


def layer_boundaries(config: WallTypeConfig, thickness: float) -> List[float]:
    """Signed offsets of every layer boundary, walking from -half to +half.

    Layer thicknesses are relative: the stack is scaled so its sum equals
    ``thickness`` (drawing units).

    Returns:
        ``len(config.layers) + 1`` offsets, or an empty list when the stack
        has no usable thickness.
    """
    total = config.layer_thickness_sum
    if not config.layers or total <= 0:
        return []

    factor = thickness / total
    offset = -thickness / 2.0
    boundaries = [offset]
    for layer in config.layers:
        offset += layer.thickness * factor
        boundaries.append(offset)
    return boundaries


def compute_finish_offsets(
    config: WallTypeConfig,
    thickness: float,
    flipped: bool = False,
) -> Tuple[Optional[float], Optional[float]]:
    """Compute the signed (left, right) finish-line offsets of a wall.

    Exterior walls: the right finish sits just inside a leading siding layer
    and the left finish just before a trailing drywall layer. Interior walls
    use leading and trailing drywall layers for both. Flipping mirrors the
    result across the centerline.

    Args:
        config: Wall type configuration.
        thickness: Total wall thickness in drawing units.
        flipped: Whether the wall's layer stack is mirrored.

    Returns:
        (left_offset, right_offset); either may be None when the stack has
        no matching face layer.
    """
    boundaries = layer_boundaries(config, thickness)
    if not boundaries:
        return None, None

    first_kind = config.layers[0].kind
    last_kind = config.layers[-1].kind
    leading_face = LayerKind.SIDING if config.is_exterior else LayerKind.DRYWALL

    right = boundaries[1] if first_kind is leading_face else None
    left = boundaries[-2] if last_kind is LayerKind.DRYWALL else None

    if flipped:
        left, right = (
            None if right is None else -right,
            None if left is None else -left,
        )

    return left, right


# =============================================================================
# Geometry Builder
# =============================================================================


def resolve_thickness(wall: Wall, config: WallTypeConfig) -> float:
    """Wall thickness in drawing units (override, else the type thickness)."""
    inches = wall.thickness if wall.thickness is not None else config.thickness
    return inches_to_drawing_units(inches)


def build_wall_geometry(
    wall: Wall,
    config: WallTypeConfig,
    index: int = 0,
) -> Optional[WallGeometry]:
    """Build the geometry of a single wall.

    Args:
        wall: Wall record.
        config: Wall type configuration for the wall.
        index: Position of the wall in the computation arena.

    Returns:
        WallGeometry, or None for a zero-length wall.
    """
    wall_length = distance(wall.start, wall.end)
    direction = normalize(sub(wall.end, wall.start))
    if direction is None or wall_length < MIN_WALL_LENGTH:
        logger.debug("Skipping zero-length wall %s", wall.id)
        return None

    perp = perpendicular(direction)
    thickness = resolve_thickness(wall, config)
    half = thickness / 2.0

    geometry = WallGeometry(
        wall=wall,
        index=index,
        thickness=thickness,
        half_thickness=half,
        length=wall_length,
        direction=direction,
        perpendicular=perp,
        is_exterior=config.is_exterior,
        start_left=offset_point(wall.start, perp, half),
        start_right=offset_point(wall.start, perp, -half),
        end_left=offset_point(wall.end, perp, half),
        end_right=offset_point(wall.end, perp, -half),
    )

    left_offset, right_offset = compute_finish_offsets(
        config, thickness, wall.flipped
    )
    if left_offset is not None:
        geometry.left_finish_offset = left_offset
        geometry.start_left_finish = offset_point(wall.start, perp, left_offset)
        geometry.end_left_finish = offset_point(wall.end, perp, left_offset)
    if right_offset is not None:
        geometry.right_finish_offset = right_offset
        geometry.start_right_finish = offset_point(wall.start, perp, right_offset)
        geometry.end_right_finish = offset_point(wall.end, perp, right_offset)

    return geometry


def build_wall_geometries(
    walls: List[Wall],
    configs: List[WallTypeConfig],
) -> List[Optional[WallGeometry]]:
    """Build geometry for every wall, keeping positions aligned with input.

    Args:
        walls: Wall records.
        configs: Wall type configuration per wall (same length as walls).

    Returns:
        One entry per wall; None where the wall has no geometry.
    """
    return [
        build_wall_geometry(wall, config, index=i)
        for i, (wall, config) in enumerate(zip(walls, configs))
    ]
