# File: src/floorplan_editor/wall_junctions/wall_linework.py

"""Renderer-facing linework derived from a trim map.

Converts each wall's geometry and trim record into plain drawable
primitives: the fill polygon, the edge and finish lines split around their
gaps, end caps, finish caps and T-junction connectors. Renderers draw these
directly without knowing anything about junctions.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from floorplan_editor.utils.geometry_helpers import distance, lerp, param_along

from .junction_types import (
    Gap,
    Point2D,
    Side,
    TrimMap,
    TrimRecord,
    WallEnd,
    WallGeometry,
)

logger = logging.getLogger(__name__)

Segment = Tuple[Point2D, Point2D]

MIN_SEGMENT_LENGTH = 1e-6


@dataclass
class WallLinework:
    """Drawable primitives for one wall.

    Attributes:
        wall_id: Source wall id.
        fill_polygon: Corners [start_left, end_left, end_right, start_right].
        left_edge: Visible sub-segments of the left edge.
        right_edge: Visible sub-segments of the right edge.
        left_finish: Visible sub-segments of the left finish line.
        right_finish: Visible sub-segments of the right finish line.
        end_caps: Perpendicular caps at untrimmed, non-T ends.
        finish_caps: Edge-to-finish closures at ends without finish trims.
        connectors: T-junction opening closures.
    """

    wall_id: str
    fill_polygon: List[Point2D] = field(default_factory=list)
    left_edge: List[Segment] = field(default_factory=list)
    right_edge: List[Segment] = field(default_factory=list)
    left_finish: List[Segment] = field(default_factory=list)
    right_finish: List[Segment] = field(default_factory=list)
    end_caps: List[Segment] = field(default_factory=list)
    finish_caps: List[Segment] = field(default_factory=list)
    connectors: List[Segment] = field(default_factory=list)

    def edge(self, side: Side) -> List[Segment]:
        return self.left_edge if side is Side.LEFT else self.right_edge

    def finish(self, side: Side) -> List[Segment]:
        return self.left_finish if side is Side.LEFT else self.right_finish


def corner_point(
    geometry: WallGeometry,
    trim: TrimRecord,
    end: WallEnd,
    side: Side,
) -> Point2D:
    """Trimmed edge corner, or the natural corner without an override."""
    point = trim.get_trim(end, side)
    return point if point is not None else geometry.edge_point(end, side)


def finish_point(
    geometry: WallGeometry,
    trim: TrimRecord,
    end: WallEnd,
    side: Side,
) -> Optional[Point2D]:
    """Trimmed finish-line endpoint, or the natural one."""
    point = trim.get_trim(end, side, finish=True)
    return point if point is not None else geometry.finish_point(end, side)


def split_line(
    start: Point2D,
    end: Point2D,
    gaps: Sequence[Gap],
) -> List[Segment]:
    """Split a line into drawable sub-segments around sorted gaps.

    Gap bounds are re-measured along ``start -> end`` so gaps recorded on
    the untrimmed line still apply after trimming. Portions of a gap outside
    the line are ignored.
    """
    if distance(start, end) < MIN_SEGMENT_LENGTH:
        return []

    segments = []
    cursor = 0.0
    eps = MIN_SEGMENT_LENGTH / distance(start, end)

    for gap in gaps:
        lo = param_along(gap.start, start, end)
        hi = param_along(gap.end, start, end)
        if hi < lo:
            lo, hi = hi, lo
        if hi <= cursor:
            continue
        if lo > cursor + eps:
            segments.append((lerp(start, end, cursor), lerp(start, end, min(lo, 1.0))))
        cursor = max(cursor, hi)
        if cursor >= 1.0:
            break

    if cursor < 1.0 - eps:
        segments.append((lerp(start, end, cursor), end))
    return segments


def build_wall_linework(geometry: WallGeometry, trim: TrimRecord) -> WallLinework:
    """Build the drawable linework of one wall.

    Args:
        geometry: Wall geometry.
        trim: The wall's sorted trim record.

    Returns:
        WallLinework for the wall.
    """
    linework = WallLinework(wall_id=geometry.wall_id)
    linework.fill_polygon = [
        corner_point(geometry, trim, WallEnd.START, Side.LEFT),
        corner_point(geometry, trim, WallEnd.END, Side.LEFT),
        corner_point(geometry, trim, WallEnd.END, Side.RIGHT),
        corner_point(geometry, trim, WallEnd.START, Side.RIGHT),
    ]

    for side in (Side.LEFT, Side.RIGHT):
        linework.edge(side).extend(
            split_line(
                corner_point(geometry, trim, WallEnd.START, side),
                corner_point(geometry, trim, WallEnd.END, side),
                trim.gaps(side),
            )
        )

        start = finish_point(geometry, trim, WallEnd.START, side)
        end = finish_point(geometry, trim, WallEnd.END, side)
        if start is not None and end is not None:
            linework.finish(side).extend(
                split_line(start, end, trim.gaps(side, finish=True))
            )

    for end in (WallEnd.START, WallEnd.END):
        if trim.has_t(end):
            continue

        if not trim.is_end_trimmed(end):
            linework.end_caps.append(
                (
                    corner_point(geometry, trim, end, Side.LEFT),
                    corner_point(geometry, trim, end, Side.RIGHT),
                )
            )

        for side in (Side.LEFT, Side.RIGHT):
            natural = geometry.finish_point(end, side)
            if natural is None or trim.get_trim(end, side, finish=True) is not None:
                continue
            linework.finish_caps.append(
                (corner_point(geometry, trim, end, side), natural)
            )

    linework.connectors = [(c.start, c.end) for c in trim.connectors]
    return linework


def build_linework(trim_map: TrimMap) -> Dict[str, WallLinework]:
    """Build linework for every wall in a trim map."""
    result = {
        wall_id: build_wall_linework(trim_map.geometries[wall_id], trim)
        for wall_id, trim in trim_map.trims.items()
    }
    logger.debug("Built linework for %d walls", len(result))
    return result
