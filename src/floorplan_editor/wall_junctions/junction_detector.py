# File: src/floorplan_editor/wall_junctions/junction_detector.py

"""Pairwise wall junction detection.

Classifies every unordered pair of walls with geometry into zero or more
junctions:
1. L-corners: two endpoints within the corner tolerance
2. T-junctions: an endpoint close to the mid-span of the other wall
3. Crossings: centerlines intersect strictly inside both walls

Pairs are visited in wall-id order so results do not depend on the order of
the input list. Each match is an independent Junction.

All measurements are in drawing units.
"""

import logging
from typing import List, Optional, Sequence

from floorplan_editor.config.junctions import DEFAULT_TOLERANCES, JunctionTolerances
from floorplan_editor.utils.geometry_helpers import (
    distance,
    line_intersection_params,
    offset_point,
    project_to_segment,
)

from .junction_types import (
    Junction,
    JunctionType,
    WallEnd,
    WallGeometry,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Tolerances
# =============================================================================


def corner_tolerance(
    geom_a: WallGeometry,
    geom_b: WallGeometry,
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
) -> float:
    """Endpoint coincidence distance for an L-corner between two walls."""
    return max(
        tolerances.corner_min_tolerance,
        max(geom_a.half_thickness, geom_b.half_thickness) + tolerances.corner_margin,
    )


def t_tolerance(
    incoming: WallGeometry,
    host: WallGeometry,
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
) -> float:
    """Endpoint-to-host distance for a T-junction."""
    return max(
        (host.thickness + incoming.thickness) / 2.0 + tolerances.t_margin,
        tolerances.t_min_tolerance,
    )


def canonical_order(geometries: Sequence[Optional[WallGeometry]]) -> List[int]:
    """Arena indices of walls with geometry, sorted by wall id."""
    present = [i for i, geom in enumerate(geometries) if geom is not None]
    return sorted(present, key=lambda i: (geometries[i].wall_id, i))


# =============================================================================
# Pair Classification
# =============================================================================


def _detect_corners(
    geom_a: WallGeometry,
    geom_b: WallGeometry,
    tolerances: JunctionTolerances,
) -> List[Junction]:
    """Check all four endpoint combinations for coincidence."""
    found = []
    tol = corner_tolerance(geom_a, geom_b, tolerances)

    for end_a in (WallEnd.START, WallEnd.END):
        for end_b in (WallEnd.START, WallEnd.END):
            point_a = geom_a.center_point(end_a)
            dist = distance(point_a, geom_b.center_point(end_b))
            if dist < tol:
                logger.debug(
                    "L-corner: %s.%s meets %s.%s (dist=%.3f, tol=%.3f)",
                    geom_a.wall_id,
                    end_a.value,
                    geom_b.wall_id,
                    end_b.value,
                    dist,
                    tol,
                )
                found.append(
                    Junction(
                        junction_type=JunctionType.L_CORNER,
                        first=geom_a.index,
                        second=geom_b.index,
                        first_end=end_a,
                        second_end=end_b,
                        point=point_a,
                    )
                )
    return found


def _detect_t_junctions(
    incoming: WallGeometry,
    host: WallGeometry,
    tolerances: JunctionTolerances,
) -> List[Junction]:
    """Check both endpoints of ``incoming`` against the body of ``host``."""
    found = []
    tol = t_tolerance(incoming, host, tolerances)
    band = tolerances.t_endpoint_band

    for end in (WallEnd.START, WallEnd.END):
        point = incoming.center_point(end)
        dist, t = project_to_segment(point, host.wall.start, host.wall.end)

        # Parameters exactly on the band belong to the host's corners
        if band < t < 1.0 - band and dist < tol:
            logger.debug(
                "T-junction: %s.%s meets %s at t=%.4f (dist=%.3f, tol=%.3f)",
                incoming.wall_id,
                end.value,
                host.wall_id,
                t,
                dist,
                tol,
            )
            found.append(
                Junction(
                    junction_type=JunctionType.T_JUNCTION,
                    first=incoming.index,
                    second=host.index,
                    first_end=end,
                    point=point,
                    host_t=t,
                )
            )
    return found


def _detect_crossing(
    geom_a: WallGeometry,
    geom_b: WallGeometry,
    tolerances: JunctionTolerances,
) -> Optional[Junction]:
    """Intersect the two centerlines and accept interior crossings only."""
    params = line_intersection_params(
        geom_a.wall.start,
        geom_a.direction,
        geom_b.wall.start,
        geom_b.direction,
        tolerances.parallel_epsilon,
    )
    if params is None:
        return None

    t_a = params[0] / geom_a.length
    t_b = params[1] / geom_b.length
    band = tolerances.cross_endpoint_band

    if not (band < t_a < 1.0 - band and band < t_b < 1.0 - band):
        return None

    point = offset_point(geom_a.wall.start, geom_a.direction, params[0])
    logger.debug(
        "Crossing: %s x %s at (%.3f, %.3f) (t_a=%.4f, t_b=%.4f)",
        geom_a.wall_id,
        geom_b.wall_id,
        point[0],
        point[1],
        t_a,
        t_b,
    )
    return Junction(
        junction_type=JunctionType.CROSS,
        first=geom_a.index,
        second=geom_b.index,
        point=point,
        host_t=t_a,
        other_t=t_b,
    )


def detect_pair_junctions(
    geom_a: WallGeometry,
    geom_b: WallGeometry,
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
) -> List[Junction]:
    """Detect every junction between two walls.

    Args:
        geom_a: First wall geometry.
        geom_b: Second wall geometry.
        tolerances: Detection thresholds.

    Returns:
        L-corners first, then T-junctions with either wall as host, then a
        crossing if the centerlines cross mid-span.
    """
    junctions = _detect_corners(geom_a, geom_b, tolerances)
    junctions.extend(_detect_t_junctions(geom_a, geom_b, tolerances))
    junctions.extend(_detect_t_junctions(geom_b, geom_a, tolerances))

    crossing = _detect_crossing(geom_a, geom_b, tolerances)
    if crossing is not None:
        junctions.append(crossing)

    return junctions


def detect_junctions(
    geometries: Sequence[Optional[WallGeometry]],
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
) -> List[Junction]:
    """Detect junctions for every unordered pair of walls.

    This is the main entry point for junction detection.

    Args:
        geometries: Wall geometry arena; None entries are skipped.
        tolerances: Detection thresholds.

    Returns:
        All detected junctions, in canonical pair order.
    """
    order = canonical_order(geometries)
    junctions: List[Junction] = []

    for pos, i in enumerate(order):
        for j in order[pos + 1:]:
            junctions.extend(
                detect_pair_junctions(geometries[i], geometries[j], tolerances)
            )

    logger.info(
        "Detected %d junctions for %d walls (%d L, %d T, %d X)",
        len(junctions),
        len(order),
        sum(1 for j in junctions if j.junction_type is JunctionType.L_CORNER),
        sum(1 for j in junctions if j.junction_type is JunctionType.T_JUNCTION),
        sum(1 for j in junctions if j.junction_type is JunctionType.CROSS),
    )
    return junctions
