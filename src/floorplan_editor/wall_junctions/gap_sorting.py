# File: src/floorplan_editor/wall_junctions/gap_sorting.py

"""Gap construction and ordering along a wall's edge and finish lines.

Gaps are collected per wall while junctions are resolved, in whatever order
the pairs are visited. Before the trim map is handed to renderers every gap
list is sorted by distance from its owning line's start point, so a renderer
can walk the line once: draw, skip gap, draw.
"""

import logging
from typing import List, Optional, Sequence

from floorplan_editor.utils.geometry_helpers import (
    distance,
    lerp,
    project_to_segment,
)

from .junction_types import Gap, Point2D, Side, TrimRecord, WallEnd, WallGeometry

logger = logging.getLogger(__name__)


def make_gap(
    point_a: Point2D,
    point_b: Point2D,
    line_start: Point2D,
    line_end: Point2D,
    t: Optional[float] = None,
) -> Gap:
    """Build a gap on a line from two cut points near it.

    Both points are projected perpendicularly onto the line and the gap is
    ordered by their parameter along ``line_start -> line_end``.

    Args:
        point_a: First cut point.
        point_b: Second cut point.
        line_start: Start of the owning line.
        line_end: End of the owning line.
        t: Junction parameter on the host centerline.

    Returns:
        Gap with start/end on the line and their parameters.
    """
    _, t_a = project_to_segment(point_a, line_start, line_end)
    _, t_b = project_to_segment(point_b, line_start, line_end)
    if t_b < t_a:
        t_a, t_b = t_b, t_a

    return Gap(
        start=lerp(line_start, line_end, t_a),
        end=lerp(line_start, line_end, t_b),
        t=t,
        t_start=t_a,
        t_end=t_b,
    )


def sort_gaps(gaps: Sequence[Gap], line_start: Point2D) -> List[Gap]:
    """Return gaps ordered by distance of their start from the line start.

    Ties are broken by the distance of the gap end.
    """
    return sorted(
        gaps,
        key=lambda g: (distance(line_start, g.start), distance(line_start, g.end)),
    )


def sort_wall_gaps(geometry: WallGeometry, trim: TrimRecord) -> None:
    """Sort all four gap lists of a wall in place.

    Edge gaps are ordered from the edge's start corner; finish gaps from the
    finish line's start point (falling back to the edge corner when the wall
    has no finish line on that side).
    """
    for side in (Side.LEFT, Side.RIGHT):
        edge_start = geometry.edge_point(WallEnd.START, side)
        edge_gaps = trim.gaps(side)
        edge_gaps[:] = sort_gaps(edge_gaps, edge_start)

        finish_start = geometry.finish_point(WallEnd.START, side)
        if finish_start is None:
            finish_start = edge_start
        finish_gaps = trim.gaps(side, finish=True)
        finish_gaps[:] = sort_gaps(finish_gaps, finish_start)


def sort_all_gaps(
    geometries: Sequence[Optional[WallGeometry]],
    trims: Sequence[Optional[TrimRecord]],
) -> None:
    """Sort the gap lists of every wall in the arena."""
    count = 0
    for geometry, trim in zip(geometries, trims):
        if geometry is None or trim is None:
            continue
        sort_wall_gaps(geometry, trim)
        count += sum(
            len(trim.gaps(side, finish))
            for side in (Side.LEFT, Side.RIGHT)
            for finish in (False, True)
        )
    logger.debug("Sorted %d gaps", count)
