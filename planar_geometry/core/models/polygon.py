"""
Polygon class for planar geometry evaluation.

A polygon is an ordered ring of vertices, implicitly closed: the last vertex
connects back to the first. Rings stored explicitly closed (first vertex
repeated at the end, as GIS formats usually do) are accepted and the
duplicate is dropped.

Simple (non-self-intersecting) polygons are assumed. Self-intersecting rings
are not rejected or repaired; queries on them return the plain formula
results (signed shoelace sum, nearest edge, even-odd parity).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Tuple, Union

import numpy as np

from ..errors import InvalidInputError
from .point import Point

MIN_VERTICES = 3

VertexLike = Union[Point, Tuple[float, float], Iterable[float]]


def _to_point(vertex: VertexLike, index: int) -> Point:
    """Convert a vertex (Point or coordinate pair) to a Point."""
    if isinstance(vertex, Point):
        return vertex
    if isinstance(vertex, dict):
        return Point.from_dict(vertex)
    try:
        coords = tuple(vertex)
    except TypeError:
        raise InvalidInputError(f"Vertex {index} is not a coordinate pair: {vertex!r}") from None
    if len(coords) != 2:
        raise InvalidInputError(f"Vertex {index} must have exactly 2 coordinates, got {len(coords)}")
    try:
        return Point(coords[0], coords[1])
    except InvalidInputError as exc:
        raise InvalidInputError(f"Vertex {index}: {exc}") from None


@dataclass(frozen=True)
class Polygon:
    """
    An immutable simple polygon.

    Attributes:
        vertices: Tuple of at least 3 Points in ring order (not repeated at the end)
    """

    vertices: Tuple[Point, ...]

    def __post_init__(self):
        """Validate the ring after initialization."""
        points = tuple(_to_point(v, i) for i, v in enumerate(self.vertices))

        # Drop the explicit closing vertex of a closed ring
        if len(points) > MIN_VERTICES and points[0] == points[-1]:
            points = points[:-1]

        if len(points) < MIN_VERTICES:
            raise InvalidInputError(
                f"Polygon must have at least {MIN_VERTICES} vertices, got {len(points)}"
            )
        if len(set(points)) < MIN_VERTICES:
            raise InvalidInputError(
                f"Polygon must have at least {MIN_VERTICES} distinct vertices, got {len(set(points))}"
            )

        object.__setattr__(self, "vertices", points)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    @property
    def num_distinct_vertices(self) -> int:
        """Number of distinct vertex positions."""
        return len(set(self.vertices))

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Yield consecutive vertex pairs, including the closing edge."""
        n = len(self.vertices)
        for i in range(n):
            yield self.vertices[i], self.vertices[(i + 1) % n]

    def as_array(self) -> np.ndarray:
        """
        Return the vertices as a read-only (N, 2) float array.

        The ring is not closed (first vertex is not repeated).
        """
        arr = np.array([v.as_tuple() for v in self.vertices], dtype=float)
        arr.flags.writeable = False
        return arr

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def reversed(self) -> "Polygon":
        """Return the same ring with opposite winding."""
        return Polygon(tuple(reversed(self.vertices)))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize polygon to dictionary."""
        return {"vertices": [[v.x, v.y] for v in self.vertices]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Polygon":
        """
        Create a Polygon from a dictionary.

        Raises:
            InvalidInputError: If 'vertices' is missing or invalid
        """
        if "vertices" not in data:
            raise InvalidInputError("Polygon requires 'vertices'")
        return cls(tuple(data["vertices"]))

    def __repr__(self) -> str:
        return f"Polygon({len(self.vertices)} vertices)"


def make_polygon(vertices: Iterable[VertexLike]) -> Polygon:
    """
    Construct a Polygon from an ordered sequence of vertices.

    Args:
        vertices: (x, y) pairs or Point instances in ring order

    Raises:
        InvalidInputError: If fewer than 3 (distinct) vertices are given,
            or any vertex is non-finite
    """
    if vertices is None:
        raise InvalidInputError("Polygon vertices cannot be None")
    return Polygon(tuple(vertices))
