"""Planar geometry primitives used by the propagation model."""

import math

from wifi_coverage.schemas.floor_plan import Point


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def rotate_point(point: Point, center: Point, angle_degrees: float) -> Point:
    """Rotate a point around a center by an angle in degrees."""
    angle_rad = math.radians(angle_degrees)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(
        x=center.x + (dx * cos_a - dy * sin_a),
        y=center.y + (dx * sin_a + dy * cos_a)
    )


def point_to_segment_distance(p: Point, seg_start: Point, seg_end: Point) -> float:
    """
    Distance from a point to the closest point of a line segment.

    The projection onto the segment's line is clamped to the segment, so
    points beyond either end measure to that endpoint. A zero-length
    segment is treated as a single point.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return distance(p, seg_start)

    t = ((p.x - seg_start.x) * dx + (p.y - seg_start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    closest = Point(x=seg_start.x + t * dx, y=seg_start.y + t * dy)
    return distance(p, closest)


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """
    Test whether segment a-b properly crosses segment c-d.

    Both intersection parameters must lie strictly inside (0, 1): touching
    at an endpoint is not a crossing. Parallel and collinear segments
    (zero determinant) never intersect, even when they overlap.
    """
    det = (b.x - a.x) * (d.y - c.y) - (d.x - c.x) * (b.y - a.y)
    if det == 0:
        return False

    lam = ((d.y - c.y) * (d.x - a.x) + (c.x - d.x) * (d.y - a.y)) / det
    gamma = ((a.y - b.y) * (d.x - a.x) + (b.x - a.x) * (d.y - a.y)) / det
    return (0 < lam < 1) and (0 < gamma < 1)
