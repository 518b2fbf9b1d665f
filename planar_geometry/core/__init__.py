"""
Core module for planar geometry evaluation.

This module contains pure Python implementations with no UI or runtime
dependencies. Every query is synchronous and side-effect free.
"""

from .errors import GeometryError, InvalidInputError, ComputationError

from .models import (
    Point,
    Polygon,
    make_point,
    make_polygon,
    EvaluationOptions,
    DistanceMode,
)

from .geometry import (
    area,
    signed_area,
    perimeter,
    distance,
    contains,
    on_boundary,
    point_segment_distance,
)

from .results import EvaluationResult

from .evaluator import evaluate, evaluate_coordinates

__all__ = [
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

    # Geometry
    "area",
    "signed_area",
    "perimeter",
    "distance",
    "contains",
    "on_boundary",
    "point_segment_distance",

    # Results
    "EvaluationResult",

    # Evaluation
    "evaluate",
    "evaluate_coordinates",
]
