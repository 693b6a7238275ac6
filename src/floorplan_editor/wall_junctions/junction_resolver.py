# File: src/floorplan_editor/wall_junctions/junction_resolver.py

"""Wall junction trim resolution.

Given the wall geometry arena and the detected junctions, this module:
1. Miters edges and finish lines at L-corners
2. Cuts incoming walls and perforates hosts at T-junctions
3. Perforates both walls at mid-span crossings
4. Runs the full pipeline through compute_wall_trims()

Trim records live in an array parallel to the geometry arena and are
addressed by the junction's wall indices. Every failure (parallel lines, a
point beyond the miter guard, a cut that would lengthen a wall) leaves the
affected line untrimmed instead of raising.

All measurements are in drawing units.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from floorplan_editor.config.junctions import DEFAULT_TOLERANCES, JunctionTolerances
from floorplan_editor.config.wall_types import WALL_TYPES, get_wall_type_config
from floorplan_editor.utils.geometry_helpers import (
    cross,
    distance,
    dot,
    lerp,
    line_intersection,
    negate,
    offset_point,
    sub,
)

from .gap_sorting import make_gap, sort_all_gaps
from .junction_detector import detect_junctions
from .junction_trace import JunctionTracer
from .junction_types import (
    Connector,
    Junction,
    JunctionType,
    Point2D,
    Side,
    TrimMap,
    TrimRecord,
    Vector2D,
    Wall,
    WallEnd,
    WallGeometry,
    WallTypeConfig,
)
from .wall_geometry import build_wall_geometries

logger = logging.getLogger(__name__)

Line = Tuple[Point2D, Vector2D]

_SIDES = (Side.LEFT, Side.RIGHT)


# =============================================================================
# Line Helpers
# =============================================================================


def _edge_line(geom: WallGeometry, side: Side) -> Line:
    return geom.edge_point(WallEnd.START, side), geom.direction


def _finish_line(geom: WallGeometry, side: Side) -> Optional[Line]:
    point = geom.finish_point(WallEnd.START, side)
    if point is None:
        return None
    return point, geom.direction


def _face_line(geom: WallGeometry, side: Side) -> Line:
    """Finish line on a side, or the edge line when the side has none."""
    line = _finish_line(geom, side)
    return line if line is not None else _edge_line(geom, side)


def _intersect(
    line_a: Optional[Line],
    line_b: Optional[Line],
    tolerances: JunctionTolerances,
) -> Optional[Point2D]:
    if line_a is None or line_b is None:
        return None
    return line_intersection(
        line_a[0], line_a[1], line_b[0], line_b[1], tolerances.parallel_epsilon
    )


def _guard_limit(
    geom_a: WallGeometry,
    geom_b: WallGeometry,
    tolerances: JunctionTolerances,
) -> float:
    return tolerances.miter_guard_factor * max(
        geom_a.half_thickness, geom_b.half_thickness
    )


def _within_guard(point: Optional[Point2D], origin: Point2D, limit: float) -> bool:
    return point is not None and distance(point, origin) <= limit


def away_direction(geom: WallGeometry, end: WallEnd) -> Vector2D:
    """Direction pointing away from the junction at ``end``."""
    return geom.direction if end is WallEnd.START else negate(geom.direction)


def matching_sides(end_a: WallEnd, end_b: WallEnd) -> List[Tuple[Side, Side]]:
    """Edge pairs that meet at a corner between two wall ends.

    When one wall arrives and the other leaves, left meets left. When both
    walls start (or both end) at the corner their directions oppose, so left
    meets right.
    """
    # Always pairing left-left and right-right crosses the miters of walls
    # drawn head to head (start-start or end-end), so those pairs swap sides.
    if end_a is not end_b:
        return [(Side.LEFT, Side.LEFT), (Side.RIGHT, Side.RIGHT)]
    return [(Side.LEFT, Side.RIGHT), (Side.RIGHT, Side.LEFT)]


# =============================================================================
# L-Corner Resolution
# =============================================================================


def _miter_edges(
    geom_a: WallGeometry,
    end_a: WallEnd,
    trim_a: TrimRecord,
    geom_b: WallGeometry,
    end_b: WallEnd,
    trim_b: TrimRecord,
    pairs: List[Tuple[Side, Side]],
    origin: Point2D,
    limit: float,
    tolerances: JunctionTolerances,
) -> int:
    """Miter both matching edge pairs, or neither."""
    points = []
    for side_a, side_b in pairs:
        point = _intersect(
            _edge_line(geom_a, side_a), _edge_line(geom_b, side_b), tolerances
        )
        if not _within_guard(point, origin, limit):
            logger.debug(
                "Discarding corner miter %s/%s (%s-%s)",
                geom_a.wall_id,
                geom_b.wall_id,
                side_a.value,
                side_b.value,
            )
            return 0
        points.append((side_a, side_b, point))

    for side_a, side_b, point in points:
        trim_a.set_trim(end_a, side_a, point)
        trim_b.set_trim(end_b, side_b, point)
    return len(points)


def _butt_to_drywall(
    exterior: WallGeometry,
    exterior_end: WallEnd,
    exterior_trim: TrimRecord,
    interior: WallGeometry,
    interior_end: WallEnd,
    interior_trim: TrimRecord,
    side_map: Dict[Side, Side],
    origin: Point2D,
    limit: float,
    tolerances: JunctionTolerances,
) -> int:
    """Exterior/interior corner: the interior wall stops at the drywall face.

    Only the exterior wall's drywall edge is mitered; its siding edge runs
    straight through the corner.
    """
    applied = 0
    drywall_side = exterior.interior_side
    drywall_line = _edge_line(exterior, drywall_side)

    point = _intersect(
        drywall_line, _edge_line(interior, side_map[drywall_side]), tolerances
    )
    if _within_guard(point, origin, limit):
        exterior_trim.set_trim(exterior_end, drywall_side, point)
        applied += 1

    for side in _SIDES:
        point = _intersect(_edge_line(interior, side), drywall_line, tolerances)
        if _within_guard(point, origin, limit):
            interior_trim.set_trim(interior_end, side, point)
            applied += 1

    return applied


def _miter_finish_lines(
    geom_a: WallGeometry,
    end_a: WallEnd,
    trim_a: TrimRecord,
    geom_b: WallGeometry,
    end_b: WallEnd,
    trim_b: TrimRecord,
    pairs: List[Tuple[Side, Side]],
    origin: Point2D,
    limit: float,
    tolerances: JunctionTolerances,
) -> int:
    applied = 0
    for side_a, side_b in pairs:
        point = _intersect(
            _finish_line(geom_a, side_a), _finish_line(geom_b, side_b), tolerances
        )
        if _within_guard(point, origin, limit):
            trim_a.set_trim(end_a, side_a, point, finish=True)
            trim_b.set_trim(end_b, side_b, point, finish=True)
            applied += 1
    return applied


def resolve_l_corner(
    junction: Junction,
    geometries: Sequence[Optional[WallGeometry]],
    trims: Sequence[Optional[TrimRecord]],
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
    tracer: Optional[JunctionTracer] = None,
) -> None:
    """Trim two walls meeting end to end.

    Args:
        junction: L_CORNER junction.
        geometries: Wall geometry arena.
        trims: Trim record arena (mutated).
        tolerances: Resolution thresholds.
        tracer: Optional junction tracer.
    """
    if tracer is None:
        tracer = JunctionTracer()
    geom_a, geom_b = geometries[junction.first], geometries[junction.second]
    trim_a, trim_b = trims[junction.first], trims[junction.second]
    end_a, end_b = junction.first_end, junction.second_end
    wall_ids = (geom_a.wall_id, geom_b.wall_id)
    ends = (end_a.value, end_b.value)

    turn = cross(away_direction(geom_a, end_a), away_direction(geom_b, end_b))
    if abs(turn) <= tolerances.turn_epsilon:
        tracer.record("l_corner", wall_ids, ends, junction.point, turn="collinear", cross=turn)
        return

    pairs = matching_sides(end_a, end_b)
    origin = junction.point
    limit = _guard_limit(geom_a, geom_b, tolerances)
    mixed = geom_a.is_exterior != geom_b.is_exterior

    if not mixed:
        edges = _miter_edges(
            geom_a, end_a, trim_a, geom_b, end_b, trim_b,
            pairs, origin, limit, tolerances,
        )
    elif geom_a.is_exterior:
        edges = _butt_to_drywall(
            geom_a, end_a, trim_a, geom_b, end_b, trim_b,
            dict(pairs), origin, limit, tolerances,
        )
    else:
        edges = _butt_to_drywall(
            geom_b, end_b, trim_b, geom_a, end_a, trim_a,
            {side_b: side_a for side_a, side_b in pairs}, origin, limit, tolerances,
        )

    finishes = _miter_finish_lines(
        geom_a, end_a, trim_a, geom_b, end_b, trim_b,
        pairs, origin, limit, tolerances,
    )

    tracer.record(
        "l_corner",
        wall_ids,
        ends,
        origin,
        turn="ccw" if turn > 0 else "cw",
        cross=turn,
        mixed=mixed,
        pairs=[(a.value, b.value) for a, b in pairs],
        edge_trims=edges,
        finish_trims=finishes,
    )


# =============================================================================
# T-Junction Resolution
# =============================================================================


def near_side(host: WallGeometry, far_point: Point2D, t: float) -> Side:
    """Side of the host the incoming wall's body lies on.

    Compares the incoming wall's far endpoint against the host's left and
    right edge points at the same parameter.
    """
    left = lerp(host.start_left, host.end_left, t)
    right = lerp(host.start_right, host.end_right, t)
    return Side.LEFT if distance(far_point, left) <= distance(far_point, right) else Side.RIGHT


def _t_cut_points(
    incoming: WallGeometry,
    junction_point: Point2D,
    toward_host: Vector2D,
    target_line: Line,
    tolerances: JunctionTolerances,
) -> Tuple[Optional[Point2D], Optional[Point2D]]:
    """Left/right cut points of the incoming wall on the target edge line."""
    center = _intersect((junction_point, toward_host), target_line, tolerances)
    if center is not None:
        return (
            offset_point(center, incoming.perpendicular, incoming.half_thickness),
            offset_point(center, incoming.perpendicular, -incoming.half_thickness),
        )

    return (
        _intersect(_edge_line(incoming, Side.LEFT), target_line, tolerances),
        _intersect(_edge_line(incoming, Side.RIGHT), target_line, tolerances),
    )


def _shortens(
    incoming: WallGeometry,
    end: WallEnd,
    side: Side,
    point: Point2D,
) -> bool:
    """True if trimming the edge at ``end`` to ``point`` shortens it."""
    far_corner = incoming.edge_point(end.opposite, side)
    toward = negate(away_direction(incoming, end))
    along = dot(sub(point, far_corner), toward)
    return 0.0 < along < incoming.length


def _host_gap(
    host: WallGeometry,
    host_trim: TrimRecord,
    side: Side,
    finish: bool,
    point_a: Point2D,
    point_b: Point2D,
    t: Optional[float],
) -> None:
    if finish:
        line_start = host.finish_point(WallEnd.START, side)
        line_end = host.finish_point(WallEnd.END, side)
    else:
        line_start = host.edge_point(WallEnd.START, side)
        line_end = host.edge_point(WallEnd.END, side)
    host_trim.gaps(side, finish).append(
        make_gap(point_a, point_b, line_start, line_end, t)
    )


def _t_finish_exterior_host(
    incoming: WallGeometry,
    end: WallEnd,
    in_trim: TrimRecord,
    host: WallGeometry,
    host_trim: TrimRecord,
    t: float,
    origin: Point2D,
    limit: float,
    tolerances: JunctionTolerances,
) -> Dict:
    """Incoming finish lines stop at the host's drywall finish line."""
    drywall_side = host.interior_side
    host_line = _finish_line(host, drywall_side)
    if host_line is None:
        return {"finish_trims": 0, "finish_gaps": 0}

    points = {}
    for side in _SIDES:
        point = _intersect(_finish_line(incoming, side), host_line, tolerances)
        if _within_guard(point, origin, limit):
            points[side] = point
            in_trim.set_trim(end, side, point, finish=True)

    gaps = 0
    if len(points) == 2:
        _host_gap(host, host_trim, drywall_side, True, points[Side.LEFT], points[Side.RIGHT], t)
        gaps = 1
    return {"finish_trims": len(points), "finish_gaps": gaps}


def _t_finish_interior_host(
    incoming: WallGeometry,
    end: WallEnd,
    in_trim: TrimRecord,
    host: WallGeometry,
    host_trim: TrimRecord,
    near: Side,
    t: float,
    origin: Point2D,
    limit: float,
    tolerances: JunctionTolerances,
) -> Dict:
    """Incoming finish lines run through to the host's far finish line.

    Both host finish lines are opened and a connector closes the opening on
    the near side.
    """
    far = near.opposite
    near_line = _finish_line(host, near)
    far_line = _finish_line(host, far)

    near_points, far_points = {}, {}
    for side in _SIDES:
        line = _finish_line(incoming, side)
        point = _intersect(line, near_line, tolerances)
        if _within_guard(point, origin, limit):
            near_points[side] = point
        point = _intersect(line, far_line, tolerances)
        if _within_guard(point, origin, limit):
            far_points[side] = point
            in_trim.set_trim(end, side, point, finish=True)

    gaps = 0
    if len(near_points) == 2:
        _host_gap(host, host_trim, near, True, near_points[Side.LEFT], near_points[Side.RIGHT], t)
        in_trim.connectors.append(
            Connector(start=near_points[Side.LEFT], end=near_points[Side.RIGHT])
        )
        gaps += 1
    if len(far_points) == 2:
        _host_gap(host, host_trim, far, True, far_points[Side.LEFT], far_points[Side.RIGHT], t)
        gaps += 1

    return {
        "finish_trims": len(far_points),
        "finish_gaps": gaps,
        "connectors": 1 if len(near_points) == 2 else 0,
    }


def resolve_t_junction(
    junction: Junction,
    geometries: Sequence[Optional[WallGeometry]],
    trims: Sequence[Optional[TrimRecord]],
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
    tracer: Optional[JunctionTracer] = None,
) -> None:
    """Cut an incoming wall against a host and open the host's lines.

    An exterior host is always opened on its drywall face, whichever side
    the incoming wall approaches from. Other hosts are opened on the side
    the incoming wall lies on.

    Args:
        junction: T_JUNCTION junction (first = incoming, second = host).
        geometries: Wall geometry arena.
        trims: Trim record arena (mutated).
        tolerances: Resolution thresholds.
        tracer: Optional junction tracer.
    """
    if tracer is None:
        tracer = JunctionTracer()
    incoming, host = geometries[junction.first], geometries[junction.second]
    in_trim, host_trim = trims[junction.first], trims[junction.second]
    end = junction.first_end
    t = junction.host_t

    junction_point = incoming.center_point(end)
    near = near_side(host, incoming.center_point(end.opposite), t)
    target = host.interior_side if host.is_exterior else near
    limit = _guard_limit(incoming, host, tolerances)
    toward_host = negate(away_direction(incoming, end))

    cut_left, cut_right = _t_cut_points(
        incoming, junction_point, toward_host, _edge_line(host, target), tolerances
    )

    edge_gaps = 0
    if _within_guard(cut_left, junction_point, limit) and _within_guard(
        cut_right, junction_point, limit
    ):
        _host_gap(host, host_trim, target, False, cut_left, cut_right, t)
        edge_gaps = 1

    applied = []
    for side, point in ((Side.LEFT, cut_left), (Side.RIGHT, cut_right)):
        if point is None:
            continue
        if _shortens(incoming, end, side, point) and _within_guard(
            point, junction_point, limit
        ):
            in_trim.set_trim(end, side, point)
            applied.append(side.value)

    in_trim.mark_t(end, host.is_exterior)

    if host.is_exterior:
        finish = _t_finish_exterior_host(
            incoming, end, in_trim, host, host_trim, t,
            junction_point, limit, tolerances,
        )
    else:
        finish = _t_finish_interior_host(
            incoming, end, in_trim, host, host_trim, near, t,
            junction_point, limit, tolerances,
        )

    tracer.record(
        "t_junction",
        (incoming.wall_id, host.wall_id),
        (end.value, None),
        junction_point,
        host_t=t,
        near_side=near.value,
        target_side=target.value,
        host_exterior=host.is_exterior,
        edge_trims=applied,
        edge_gaps=edge_gaps,
        **finish,
    )


# =============================================================================
# Crossing Resolution
# =============================================================================


def _perforate_host(
    host: WallGeometry,
    host_trim: TrimRecord,
    crossing: WallGeometry,
    t: Optional[float],
    tolerances: JunctionTolerances,
) -> int:
    """Cut the crossing wall's footprint out of the host's lines."""
    gaps = 0
    for side in _SIDES:
        host_finish = _finish_line(host, side)
        if host_finish is not None:
            left = _intersect(_face_line(crossing, Side.LEFT), host_finish, tolerances)
            right = _intersect(_face_line(crossing, Side.RIGHT), host_finish, tolerances)
            if left is not None and right is not None:
                _host_gap(host, host_trim, side, True, left, right, t)
                gaps += 1

        host_edge = _edge_line(host, side)
        left = _intersect(_edge_line(crossing, Side.LEFT), host_edge, tolerances)
        right = _intersect(_edge_line(crossing, Side.RIGHT), host_edge, tolerances)
        if left is not None and right is not None:
            _host_gap(host, host_trim, side, False, left, right, t)
            gaps += 1
    return gaps


def resolve_crossing(
    junction: Junction,
    geometries: Sequence[Optional[WallGeometry]],
    trims: Sequence[Optional[TrimRecord]],
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
    tracer: Optional[JunctionTracer] = None,
) -> None:
    """Perforate two walls crossing mid-span. No endpoints are trimmed."""
    if tracer is None:
        tracer = JunctionTracer()
    geom_a, geom_b = geometries[junction.first], geometries[junction.second]

    gaps_a = _perforate_host(
        geom_a, trims[junction.first], geom_b, junction.host_t, tolerances
    )
    gaps_b = _perforate_host(
        geom_b, trims[junction.second], geom_a, junction.other_t, tolerances
    )

    tracer.record(
        "cross",
        (geom_a.wall_id, geom_b.wall_id),
        (None, None),
        junction.point,
        t_first=junction.host_t,
        t_second=junction.other_t,
        gaps_first=gaps_a,
        gaps_second=gaps_b,
    )


# =============================================================================
# Pipeline
# =============================================================================

_RESOLVERS = {
    JunctionType.L_CORNER: resolve_l_corner,
    JunctionType.T_JUNCTION: resolve_t_junction,
    JunctionType.CROSS: resolve_crossing,
}


def resolve_junctions(
    geometries: Sequence[Optional[WallGeometry]],
    junctions: Sequence[Junction],
    tolerances: JunctionTolerances = DEFAULT_TOLERANCES,
    tracer: Optional[JunctionTracer] = None,
) -> List[Optional[TrimRecord]]:
    """Resolve every junction into per-wall trim records.

    Junctions are applied in order; where several junctions touch the same
    wall end, the later one overwrites the earlier overrides.

    Args:
        geometries: Wall geometry arena.
        junctions: Detected junctions (arena indices).
        tolerances: Resolution thresholds.
        tracer: Optional junction tracer.

    Returns:
        Trim records parallel to ``geometries``; None where a wall has no
        geometry. Gap lists are not yet sorted.
    """
    if tracer is None:
        tracer = JunctionTracer()
    trims: List[Optional[TrimRecord]] = [
        TrimRecord(wall_id=geom.wall_id) if geom is not None else None
        for geom in geometries
    ]

    for junction in junctions:
        _RESOLVERS[junction.junction_type](
            junction, geometries, trims, tolerances, tracer
        )

    logger.info("Resolved %d junctions", len(junctions))
    return trims


def compute_wall_trims(
    walls: Sequence[Wall],
    wall_types: Optional[Dict[str, WallTypeConfig]] = None,
    tolerances: Optional[JunctionTolerances] = None,
    trace: bool = False,
) -> TrimMap:
    """Main entry point: compute trims for a whole floor plan.

    This is the single function that renderers should call. It runs the
    full pipeline: geometry -> detect -> resolve -> sort gaps. Nothing is
    retained between calls.

    Args:
        walls: Wall records.
        wall_types: Optional wall-type configs merged over the built-in
            catalog.
        tolerances: Detection and resolution thresholds.
        trace: Record junction trace events on the result.

    Returns:
        TrimMap keyed by wall id. Zero-length walls have no entry.

    Raises:
        ValueError: If the tolerances are invalid.
    """
    tolerances = (tolerances or DEFAULT_TOLERANCES).validate()
    tracer = JunctionTracer(enabled=trace)

    if not walls:
        logger.info("No walls provided, returning empty trim map")
        return TrimMap()

    catalog = dict(WALL_TYPES)
    if wall_types:
        catalog.update(wall_types)

    logger.info("Computing wall trims for %d walls", len(walls))

    configs = [get_wall_type_config(wall.wall_type, catalog) for wall in walls]
    geometries = build_wall_geometries(list(walls), configs)
    junctions = detect_junctions(geometries, tolerances)
    trims = resolve_junctions(geometries, junctions, tolerances, tracer)
    sort_all_gaps(geometries, trims)

    trim_map = TrimMap(junctions=junctions, trace=list(tracer.events))
    for geom, trim in zip(geometries, trims):
        if geom is None:
            continue
        if geom.wall_id in trim_map.trims:
            logger.warning("Duplicate wall id %s, keeping the last wall", geom.wall_id)
        trim_map.trims[geom.wall_id] = trim
        trim_map.geometries[geom.wall_id] = geom

    return trim_map
