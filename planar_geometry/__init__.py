"""
Planar Geometry - point and simple-polygon evaluation

Area, point-to-polygon distance and point-in-polygon containment for
simple polygons in the Cartesian plane.

Conventions:
- Coordinates: X, Y in a right-handed Cartesian plane, no CRS
- Polygons: implicitly closed rings of at least 3 distinct vertices
- Area: shoelace formula, absolute value (winding-independent)
- Distance: to the boundary by default; to the filled region on request
- Containment: boundary points (edges and vertices) are contained
"""

from ._version import __version__

from .core.errors import GeometryError, InvalidInputError, ComputationError
from .core.models import Point, Polygon, make_point, make_polygon
from .core.models import EvaluationOptions, DistanceMode
from .core.geometry import area, distance, contains
from .core.results import EvaluationResult
from .core.evaluator import evaluate, evaluate_coordinates

__all__ = [
    # Version
    "__version__",

    # Errors
    "GeometryError",
    "InvalidInputError",
    "ComputationError",

    # Models
    "Point",
    "Polygon",
    "make_point",
    "make_polygon",
    "EvaluationOptions",
    "DistanceMode",

    # Queries
    "area",
    "distance",
    "contains",

    # Evaluation
    "EvaluationResult",
    "evaluate",
    "evaluate_coordinates",
]
