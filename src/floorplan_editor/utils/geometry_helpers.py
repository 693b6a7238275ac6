# File: src/floorplan_editor/utils/geometry_helpers.py

"""2D vector helpers on plain (x, y) tuples."""

import math
from typing import Optional, Tuple

Point2D = Tuple[float, float]
Vector2D = Tuple[float, float]


def sub(a: Point2D, b: Point2D) -> Vector2D:
    return (a[0] - b[0], a[1] - b[1])


def negate(v: Vector2D) -> Vector2D:
    return (-v[0], -v[1])


def dot(a: Vector2D, b: Vector2D) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vector2D, b: Vector2D) -> float:
    """Z component of the 3D cross product of two planar vectors."""
    return a[0] * b[1] - a[1] * b[0]


def length(v: Vector2D) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def normalize(v: Vector2D) -> Optional[Vector2D]:
    """Unit vector along v, or None for a zero-length vector."""
    mag = length(v)
    if mag < 1e-12:
        return None
    return (v[0] / mag, v[1] / mag)


def perpendicular(v: Vector2D) -> Vector2D:
    """Rotate 90 degrees counter-clockwise."""
    return (-v[1], v[0])


def lerp(a: Point2D, b: Point2D, t: float) -> Point2D:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def offset_point(point: Point2D, direction: Vector2D, amount: float) -> Point2D:
    """Move a point along a direction by amount."""
    return (point[0] + direction[0] * amount, point[1] + direction[1] * amount)


def is_finite_point(point: Optional[Point2D]) -> bool:
    return (
        point is not None
        and math.isfinite(point[0])
        and math.isfinite(point[1])
    )


def line_intersection(
    p1: Point2D,
    d1: Vector2D,
    p2: Point2D,
    d2: Vector2D,
    epsilon: float = 1e-4,
) -> Optional[Point2D]:
    """Intersection of two infinite lines given as point + direction.

    Solves ``p1 + t*d1 = p2 + s*d2``.

    Args:
        p1: Point on the first line.
        d1: Direction of the first line.
        p2: Point on the second line.
        d2: Direction of the second line.
        epsilon: Lines with ``|d1 x d2|`` below this are parallel.

    Returns:
        The intersection point, or None for parallel lines.
    """
    denom = cross(d1, d2)
    if abs(denom) < epsilon:
        return None
    t = cross(sub(p2, p1), d2) / denom
    point = (p1[0] + t * d1[0], p1[1] + t * d1[1])
    if not is_finite_point(point):
        return None
    return point


def line_intersection_params(
    p1: Point2D,
    d1: Vector2D,
    p2: Point2D,
    d2: Vector2D,
    epsilon: float = 1e-4,
) -> Optional[Tuple[float, float]]:
    """Parameters (t, s) of the intersection of two lines, or None if parallel."""
    denom = cross(d1, d2)
    if abs(denom) < epsilon:
        return None
    diff = sub(p2, p1)
    return cross(diff, d2) / denom, cross(diff, d1) / denom


def project_to_segment(
    point: Point2D,
    seg_start: Point2D,
    seg_end: Point2D,
) -> Tuple[float, float]:
    """Unclamped projection of a point onto a segment's line.

    Args:
        point: The query point.
        seg_start: Segment start point.
        seg_end: Segment end point.

    Returns:
        (distance, t) where t is 0.0 at seg_start and 1.0 at seg_end and
        distance is measured to the projected point on the infinite line.
    """
    dx = seg_end[0] - seg_start[0]
    dy = seg_end[1] - seg_start[1]
    seg_len_sq = dx * dx + dy * dy

    if seg_len_sq < 1e-12:
        # Degenerate segment (zero length)
        return distance(point, seg_start), 0.0

    t = ((point[0] - seg_start[0]) * dx + (point[1] - seg_start[1]) * dy) / seg_len_sq
    closest = (seg_start[0] + t * dx, seg_start[1] + t * dy)
    return distance(point, closest), t


def param_along(point: Point2D, line_start: Point2D, line_end: Point2D) -> float:
    """Parameter of a point's projection along line_start → line_end."""
    return project_to_segment(point, line_start, line_end)[1]
