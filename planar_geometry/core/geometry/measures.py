"""Polygon measures: area, distance and containment (pure, stateless).

Conventions:
  - Polygons are implicitly closed; every query includes the closing edge.
  - Signed area is positive for counter-clockwise rings.
  - Points on the boundary (edges and vertices) are contained.

Implementation detail:
  - Area uses the shoelace formula over numpy arrays.
  - Boundary distance is vectorized over all edges at once. Candidates
    whose float cross product is within rounding of zero are settled with
    exact rational arithmetic, so on-edge points get exactly 0.0.
  - Containment casts a ray towards +x and counts crossings with the
    half-open rule ``(y_i > y) != (y_j > y)`` so vertices on the ray are
    counted once.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

import numpy as np

from ..errors import ComputationError, InvalidInputError
from ..models.options import DistanceMode
from ..models.point import Point
from ..models.polygon import MIN_VERTICES, Polygon

# Relative bound on the rounding error of the float cross product
_CROSS_EPS = 1e-12


def _require_polygon(polygon: Polygon) -> Polygon:
    """Re-check the ring invariant before running a query."""
    if not isinstance(polygon, Polygon):
        raise InvalidInputError(f"Expected a Polygon, got {type(polygon).__name__}")
    if len(polygon.vertices) < MIN_VERTICES:
        raise InvalidInputError(
            f"Polygon must have at least {MIN_VERTICES} vertices, got {len(polygon.vertices)}"
        )
    return polygon


def _require_point(point: Point) -> Point:
    if not isinstance(point, Point):
        raise InvalidInputError(f"Expected a Point, got {type(point).__name__}")
    return point


def _finite(value: float, what: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ComputationError(f"{what} is not finite ({value})")
    return value


def signed_area(polygon: Polygon) -> float:
    """Shoelace area with sign: positive for counter-clockwise, negative for clockwise."""
    arr = _require_polygon(polygon).as_array()
    x = arr[:, 0]
    y = arr[:, 1]
    with np.errstate(over="ignore", invalid="ignore"):
        twice = np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)
    return _finite(0.5 * twice, "Polygon area")


def area(polygon: Polygon) -> float:
    """Compute polygon area (non-negative, independent of winding).

    Sum over consecutive vertex pairs, including the wrap-around from the
    last vertex to the first, of ``x_i * y_{i+1} - x_{i+1} * y_i``, halved,
    absolute value taken.
    """
    return abs(signed_area(polygon))


def perimeter(polygon: Polygon) -> float:
    """Total length of all edges, including the closing edge."""
    arr = _require_polygon(polygon).as_array()
    d = np.roll(arr, -1, axis=0) - arr
    with np.errstate(over="ignore", invalid="ignore"):
        total = np.hypot(d[:, 0], d[:, 1]).sum()
    return _finite(total, "Polygon perimeter")


def _exactly_on_segment(point: Point, a: Point, b: Point) -> bool:
    """Exact collinearity and extent test on the original coordinates."""
    ax, ay = Fraction(a.x), Fraction(a.y)
    dx = Fraction(b.x) - ax
    dy = Fraction(b.y) - ay
    if dx == 0 and dy == 0:
        return False
    px = Fraction(point.x) - ax
    py = Fraction(point.y) - ay
    if px * dy - py * dx != 0:
        return False
    dot = px * dx + py * dy
    return 0 <= dot <= dx * dx + dy * dy


def point_segment_distance(point: Point, a: Point, b: Point) -> float:
    """Euclidean distance from ``point`` to the segment ``a``-``b``.

    Returns exactly 0.0 when the point is collinear with the segment and
    within its extent.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    px = point.x - a.x
    py = point.y - a.y

    l2 = dx * dx + dy * dy
    if l2 == 0.0:
        return math.hypot(px, py)

    cross = px * dy - py * dx
    scale = (abs(px) + abs(py)) * (abs(dx) + abs(dy))
    if abs(cross) <= _CROSS_EPS * scale and _exactly_on_segment(point, a, b):
        return 0.0

    t = (px * dx + py * dy) / l2
    t = max(0.0, min(1.0, t))
    return math.hypot(px - t * dx, py - t * dy)


def _edge_distances(point: Point, polygon: Polygon) -> np.ndarray:
    """Distance from ``point`` to every edge of ``polygon``, shape (N,)."""
    a = polygon.as_array()
    d = np.roll(a, -1, axis=0) - a
    p = np.array(point.as_tuple(), dtype=float) - a

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        l2 = np.einsum("ij,ij->i", d, d)
        dot = np.einsum("ij,ij->i", p, d)
        # Repeated consecutive vertices give zero-length edges: t = 0
        t = np.divide(dot, l2, out=np.zeros_like(dot), where=l2 > 0)
        cross = p[:, 0] * d[:, 1] - p[:, 1] * d[:, 0]
        scale = np.abs(p).sum(axis=1) * np.abs(d).sum(axis=1)
        near = (l2 > 0) & (np.abs(cross) <= _CROSS_EPS * scale)

        t = np.clip(t, 0.0, 1.0)
        dist = np.hypot(p[:, 0] - t * d[:, 0], p[:, 1] - t * d[:, 1])

    vertices = polygon.vertices
    n = len(vertices)
    for i in np.flatnonzero(near):
        if _exactly_on_segment(point, vertices[i], vertices[(i + 1) % n]):
            dist[i] = 0.0
    return dist


def on_boundary(polygon: Polygon, point: Point, tolerance: float = 0.0) -> bool:
    """Check whether ``point`` lies on an edge or vertex of ``polygon``.

    With ``tolerance == 0`` the test is exact (collinear and within the
    edge's extent); otherwise any edge closer than ``tolerance`` counts.
    """
    _require_polygon(polygon)
    _require_point(point)
    dist = _edge_distances(point, polygon)
    if tolerance > 0.0:
        return bool(np.min(dist) <= tolerance)
    return bool(np.any(dist == 0.0))


def contains(polygon: Polygon, point: Point, tolerance: float = 0.0) -> bool:
    """Point-in-polygon test; boundary points count as contained.

    Boundary points (see :func:`on_boundary`) return True. Otherwise a ray
    is cast from the point towards +x and edge crossings are counted; an odd
    count means inside.
    """
    if on_boundary(polygon, point, tolerance):
        return True

    x, y = point.x, point.y
    inside = False
    for a, b in polygon.edges():
        # Half-open on y: horizontal edges never match
        if (a.y > y) != (b.y > y):
            x_cross = a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)
            if x < x_cross:
                inside = not inside
    return inside


def distance(
    point: Point,
    polygon: Polygon,
    mode: Union[DistanceMode, str] = DistanceMode.BOUNDARY,
    tolerance: float = 0.0,
) -> float:
    """Minimum Euclidean distance from ``point`` to ``polygon``.

    Args:
        point: Query point
        polygon: Target polygon
        mode: ``BOUNDARY`` measures to the ring of edges regardless of
            whether the point is inside; ``REGION`` measures to the filled
            polygon and is zero for contained points.
        tolerance: Boundary tolerance for the containment check in
            ``REGION`` mode (see :func:`on_boundary`)

    Returns:
        Non-negative distance; exactly 0.0 for points on the boundary.
    """
    _require_polygon(polygon)
    _require_point(point)
    mode = DistanceMode.parse(mode)

    if mode is DistanceMode.REGION and contains(polygon, point, tolerance):
        return 0.0

    return _finite(np.min(_edge_distances(point, polygon)), "Distance")
