"""Geometric predicates, projections, intersections and distances in 3D."""

from __future__ import annotations

import math
import sys
from typing import Optional, Union, overload

from polymesher.mat import Mat3
from polymesher.vec import Real, Vec2, Vec3

EPSILON: Real = sys.float_info.epsilon


def weak_between(boundary0: Real, boundary1: Real, value: Real) -> bool:
    """Check that ``value`` lies between the boundaries, allowing rounding error."""
    l_eps = EPSILON * abs(value)
    return min(boundary0, boundary1) - l_eps <= value <= max(boundary0, boundary1) + l_eps


def weak_in_cuboid(corner0: Vec3, corner1: Vec3, point: Vec3) -> bool:
    """Check that ``point`` lies in the axis-aligned box spanned by two corners."""
    return all(weak_between(c0, c1, p) for c0, c1, p in zip(corner0, corner1, point))


@overload
def dot(a: Mat3, b: Mat3) -> Mat3: ...
@overload
def dot(a: Mat3, b: Vec3) -> Vec3: ...
@overload
def dot(a: Vec3, b: Vec3) -> Real: ...
@overload
def dot(a: Vec2, b: Vec2) -> Real: ...


def dot(a, b):
    """Scalar product of vectors, or matrix product with a matrix or vector."""
    if isinstance(a, Mat3):
        return a @ b
    return a.dot(b)


def cross(a: Union[Vec3, Vec2], b: Union[Vec3, Vec2]) -> Union[Vec3, Real]:
    """Vector product; for 2D vectors the scalar z component."""
    return a.cross(b)


def mixed(vec0: Vec3, vec1: Vec3, vec2: Vec3) -> Real:
    """Scalar triple product."""
    return vec0.cross(vec1).dot(vec2)


def cos(vec0: Union[Vec3, Vec2], vec1: Union[Vec3, Vec2]) -> Real:
    """Cosine of the angle between two vectors."""
    return vec0.dot(vec1) / math.sqrt(vec0.sqr_magnitude() * vec1.sqr_magnitude())


def project_on_line(point: Vec3, line_p0: Vec3, line_p1: Vec3) -> Vec3:
    """Orthogonal projection of ``point`` onto the line through two points."""
    return line_p0 + (point - line_p0).project(line_p1 - line_p0)


def project_on_plane(point: Vec3, plane_p0: Vec3, plane_p1: Vec3, plane_p2: Vec3) -> Vec3:
    """Orthogonal projection of ``point`` onto the plane through three points."""
    return plane_p0 + (point - plane_p0).project_on_plane(plane_p1 - plane_p0, plane_p2 - plane_p0)


def does_ray_intersect_plane(direction: Vec3, pl_p0: Vec3, pl_p1: Vec3, pl_p2: Vec3) -> bool:
    """Check that a direction is not parallel to the plane."""
    edge0, edge1 = pl_p1 - pl_p0, pl_p2 - pl_p0
    det = edge0.dot(direction.cross(edge1))
    return abs(det) > EPSILON


def _line_parameter(
    origin: Vec3, direction: Vec3, pl_p0: Vec3, pl_p1: Vec3, pl_p2: Vec3
) -> Optional[Real]:
    edge0, edge1 = pl_p1 - pl_p0, pl_p2 - pl_p0
    det = edge0.dot(direction.cross(edge1))
    if abs(det) <= EPSILON:
        return None
    qvec = (origin - pl_p0).cross(edge0)
    return edge1.dot(qvec) / det


def ray_intersect_plane(
    origin: Vec3, direction: Vec3, pl_p0: Vec3, pl_p1: Vec3, pl_p2: Vec3
) -> Optional[Vec3]:
    """Intersection point of a ray with a plane, or None if there is none."""
    t = _line_parameter(origin, direction, pl_p0, pl_p1, pl_p2)
    if t is None or t <= 0.0:
        return None
    return origin + direction * t


def _moller_trumbore(
    origin: Vec3, direction: Vec3, tr_p0: Vec3, tr_p1: Vec3, tr_p2: Vec3
) -> Optional[Real]:
    edge0, edge1 = tr_p1 - tr_p0, tr_p2 - tr_p0
    pvec = direction.cross(edge1)
    det = edge0.dot(pvec)
    if abs(det) <= EPSILON:
        return None
    inv_det = 1.0 / det

    tvec = origin - tr_p0
    u = tvec.dot(pvec) * inv_det
    if u < 0.0 or u > 1.0:
        return None

    qvec = tvec.cross(edge0)
    v = direction.dot(qvec) * inv_det
    if v < 0.0 or u + v > 1.0:
        return None

    return edge1.dot(qvec) * inv_det


def does_ray_intersect_triangle(
    origin: Vec3, direction: Vec3, tr_p0: Vec3, tr_p1: Vec3, tr_p2: Vec3
) -> bool:
    """Check whether a ray hits a triangle."""
    t = _moller_trumbore(origin, direction, tr_p0, tr_p1, tr_p2)
    return t is not None and t >= 0.0


def line_intersect_plane(
    line_point: Vec3, line_dir: Vec3, plane_p0: Vec3, plane_p1: Vec3, plane_p2: Vec3
) -> Optional[Vec3]:
    """Intersection point of a line with a plane, or None if they are parallel."""
    t = _line_parameter(line_point, line_dir, plane_p0, plane_p1, plane_p2)
    if t is None:
        return None
    return line_point + line_dir * t


def does_segment_intersect_triangle(
    segm_p0: Vec3, segm_p1: Vec3, tr_p0: Vec3, tr_p1: Vec3, tr_p2: Vec3
) -> bool:
    """Check whether a segment crosses a triangle."""
    t = _moller_trumbore(segm_p0, segm_p1 - segm_p0, tr_p0, tr_p1, tr_p2)
    return t is not None and 0.0 <= t <= 1.0


def segment_intersect_plane(
    p0: Vec3, p1: Vec3, pl_p0: Vec3, pl_p1: Vec3, pl_p2: Vec3
) -> Optional[Vec3]:
    """Intersection point of a segment with a plane, or None if there is none."""
    direction = p1 - p0
    t = _line_parameter(p0, direction, pl_p0, pl_p1, pl_p2)
    if t is None or not 0.0 <= t <= 1.0:
        return None
    return p0 + direction * t


def does_triangle_intersect_sphere(
    trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3, center: Vec3, radius: Real
) -> bool:
    """Check whether a triangle and a sphere have a common point."""
    proj = project_on_plane(center, trngl_p0, trngl_p1, trngl_p2)
    sqr_radius = radius * radius
    if (proj - center).sqr_magnitude() > sqr_radius:
        return False

    if is_point_on_triangle(proj, trngl_p0, trngl_p1, trngl_p2, max_sqrs_sum(trngl_p0, trngl_p1, trngl_p2)):
        return True

    closest = closest_triangle_point_to_point_on_plane(proj, trngl_p0, trngl_p1, trngl_p2)
    return (closest - center).sqr_magnitude() <= sqr_radius


def sqrs_sum(point: Vec3, trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3) -> Real:
    """Sum of squared distances from ``point`` to the triangle vertices."""
    return sum((p - point).sqr_magnitude() for p in (trngl_p0, trngl_p1, trngl_p2))


def max_sqrs_sum(trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3) -> Real:
    """Sum of the two largest squared side lengths of a triangle."""
    sqrs = sorted(
        (
            (trngl_p1 - trngl_p0).sqr_magnitude(),
            (trngl_p2 - trngl_p1).sqr_magnitude(),
            (trngl_p0 - trngl_p2).sqr_magnitude(),
        )
    )
    return sqrs[1] + sqrs[2]


def is_point_on_triangle(
    point: Vec3,
    trngl_p0: Vec3,
    trngl_p1: Vec3,
    trngl_p2: Vec3,
    max_sum: Optional[Real] = None,
) -> bool:
    """Check that a point lies on a triangle, comparing areas.

    If ``max_sum`` is given, points whose ``sqrs_sum`` exceeds it are
    rejected early.
    """
    if max_sum is not None and sqrs_sum(point, trngl_p0, trngl_p1, trngl_p2) > max_sum:
        return False

    to0, to1, to2 = trngl_p0 - point, trngl_p1 - point, trngl_p2 - point
    s0 = to0.cross(to1).magnitude()
    s1 = to0.cross(to2).magnitude()
    s2 = to1.cross(to2).magnitude()
    s = (trngl_p0 - trngl_p2).cross(trngl_p1 - trngl_p2).magnitude()

    return abs(s - s0 - s1 - s2) <= EPSILON * (s + s0 + s1 + s2)


def is_point_in_tetrahedron(
    point: Vec3, tetr_p0: Vec3, tetr_p1: Vec3, tetr_p2: Vec3, tetr_p3: Vec3
) -> bool:
    """Check that a point lies strictly inside a tetrahedron, comparing volumes."""
    to0, to1, to2, to3 = (p - point for p in (tetr_p0, tetr_p1, tetr_p2, tetr_p3))
    parts = (
        abs(mixed(to0, to2, to3))
        + abs(mixed(to0, to1, to2))
        + abs(mixed(to0, to1, to3))
        + abs(mixed(to1, to2, to3))
    )
    whole = abs(mixed(tetr_p1 - tetr_p0, tetr_p2 - tetr_p0, tetr_p3 - tetr_p0))
    return parts < whole


def closest_segment_point_to_point(point: Vec3, segm_p0: Vec3, segm_p1: Vec3) -> Vec3:
    """Point of a segment closest to ``point``."""
    proj = project_on_line(point, segm_p0, segm_p1)
    if weak_in_cuboid(segm_p0, segm_p1, proj):
        return proj
    if (segm_p0 - point).sqr_magnitude() < (segm_p1 - point).sqr_magnitude():
        return segm_p0
    return segm_p1


def _index_of_least(sqrs: tuple[Real, Real, Real]) -> int:
    if sqrs[0] < sqrs[1]:
        return 0 if sqrs[0] < sqrs[2] else 2
    return 1 if sqrs[1] < sqrs[2] else 2


def _closest_on_sides(
    point: Vec3, trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3
) -> tuple[tuple[Vec3, Vec3, Vec3], tuple[Real, Real, Real]]:
    closest = (
        closest_segment_point_to_point(point, trngl_p0, trngl_p1),
        closest_segment_point_to_point(point, trngl_p1, trngl_p2),
        closest_segment_point_to_point(point, trngl_p2, trngl_p0),
    )
    sqrs = tuple((c - point).sqr_magnitude() for c in closest)
    return closest, sqrs  # type: ignore[return-value]


def closest_triangle_point_to_point_on_plane(
    point: Vec3, trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3
) -> Vec3:
    """Point of the triangle's boundary closest to ``point``."""
    closest, sqrs = _closest_on_sides(point, trngl_p0, trngl_p1, trngl_p2)
    return closest[_index_of_least(sqrs)]


def distance_point_to_line(point: Vec3, line_p0: Vec3, line_p1: Vec3) -> Real:
    """Distance from a point to the line through two points."""
    return (project_on_line(point, line_p0, line_p1) - point).magnitude()


def distance_point_to_segment(point: Vec3, segm_p0: Vec3, segm_p1: Vec3) -> Real:
    """Distance from a point to a segment."""
    proj = project_on_line(point, segm_p0, segm_p1)
    if weak_in_cuboid(segm_p0, segm_p1, proj):
        return (proj - point).magnitude()
    return math.sqrt(min((segm_p0 - point).sqr_magnitude(), (segm_p1 - point).sqr_magnitude()))


def distance_point_to_triangle_on_plane(
    point: Vec3, trngl_p0: Vec3, trngl_p1: Vec3, trngl_p2: Vec3
) -> Real:
    """Squared distance from a point to the triangle's boundary."""
    _, sqrs = _closest_on_sides(point, trngl_p0, trngl_p1, trngl_p2)
    return min(sqrs)


def _interpolate(p0: Vec3, p1: Vec3, c: Real) -> Vec3:
    return (1.0 - c) * p0 + c * p1


def _ratio(numerator: Real, denominator: Real) -> Real:
    return 0.0 if abs(numerator) <= EPSILON else numerator / denominator


def lines_closest_points(
    line0_p0: Vec3, line0_p1: Vec3, line1_p0: Vec3, line1_p1: Vec3
) -> tuple[Vec3, Vec3]:
    """Pair of mutually closest points of two lines."""
    u = line0_p1 - line0_p0
    v = line1_p1 - line1_p0
    w = line0_p0 - line1_p0
    a, b, c = u.dot(u), u.dot(v), v.dot(v)
    d, e = u.dot(w), v.dot(w)
    big_d = a * c - b * b

    s_d = t_d = big_d
    if big_d <= EPSILON:
        s_n, s_d = 0.0, 1.0
        t_n, t_d = e, c
    else:
        s_n = b * e - c * d
        t_n = a * e - b * d

    sc = _ratio(s_n, s_d)
    tc = _ratio(t_n, t_d)
    return _interpolate(line0_p0, line0_p1, sc), _interpolate(line1_p0, line1_p1, tc)


def lines_closest_point(line0_p0: Vec3, line0_p1: Vec3, line1_p0: Vec3, line1_p1: Vec3) -> Vec3:
    """Midpoint between the mutually closest points of two lines."""
    p, q = lines_closest_points(line0_p0, line0_p1, line1_p0, line1_p1)
    return (p + q) * 0.5


def lines_distance(line0_p0: Vec3, line0_p1: Vec3, line1_p0: Vec3, line1_p1: Vec3) -> Real:
    """Distance between two lines."""
    p, q = lines_closest_points(line0_p0, line0_p1, line1_p0, line1_p1)
    return (p - q).magnitude()


def segments_closest_points(
    segm0_p0: Vec3, segm0_p1: Vec3, segm1_p0: Vec3, segm1_p1: Vec3
) -> tuple[Vec3, Vec3]:
    """Pair of mutually closest points of two segments."""
    u = segm0_p1 - segm0_p0
    v = segm1_p1 - segm1_p0
    w = segm0_p0 - segm1_p0
    a, b, c = u.dot(u), u.dot(v), v.dot(v)
    d, e = u.dot(w), v.dot(w)
    big_d = a * c - b * b

    s_d = t_d = big_d
    if big_d <= EPSILON:
        s_n, s_d = 0.0, 1.0
        t_n, t_d = e, c
    else:
        s_n = b * e - c * d
        t_n = a * e - b * d
        if s_n < 0.0:
            s_n = 0.0
            t_n, t_d = e, c
        elif s_n > s_d:
            s_n = s_d
            t_n, t_d = e + b, c

    if t_n < 0.0:
        t_n = 0.0
        if -d < 0.0:
            s_n = 0.0
        elif -d > a:
            s_n = s_d
        else:
            s_n, s_d = -d, a
    elif t_n > t_d:
        t_n = t_d
        if -d + b < 0.0:
            s_n = 0.0
        elif -d + b > a:
            s_n = s_d
        else:
            s_n, s_d = -d + b, a

    sc = _ratio(s_n, s_d)
    tc = _ratio(t_n, t_d)
    return _interpolate(segm0_p0, segm0_p1, sc), _interpolate(segm1_p0, segm1_p1, tc)


def segments_closest_point(
    segm0_p0: Vec3, segm0_p1: Vec3, segm1_p0: Vec3, segm1_p1: Vec3
) -> Vec3:
    """Midpoint between the mutually closest points of two segments."""
    p, q = segments_closest_points(segm0_p0, segm0_p1, segm1_p0, segm1_p1)
    return (p + q) * 0.5


def segments_distance(segm0_p0: Vec3, segm0_p1: Vec3, segm1_p0: Vec3, segm1_p1: Vec3) -> Real:
    """Distance between two segments."""
    p, q = segments_closest_points(segm0_p0, segm0_p1, segm1_p0, segm1_p1)
    return (p - q).magnitude()


def cpa_time(start0: Vec3, vel0: Vec3, start1: Vec3, vel1: Vec3) -> Real:
    """Time of the closest point of approach of two moving points."""
    dv = vel0 - vel1
    dv2 = dv.dot(dv)
    if dv2 <= EPSILON:
        return 0.0
    w0 = start0 - start1
    return -w0.dot(dv) / dv2


def cpa_distance(start0: Vec3, vel0: Vec3, start1: Vec3, vel1: Vec3) -> Real:
    """Distance between two moving points at their closest approach."""
    time = cpa_time(start0, vel0, start1, vel1)
    p0 = start0 + vel0 * time
    p1 = start1 + vel1 * time
    return (p1 - p0).magnitude()