"""
Data models for planar geometry evaluation.

This module provides the core data structures:
- Point: Immutable finite (x, y) coordinate pair
- Polygon: Immutable ring of at least 3 distinct vertices
- EvaluationOptions: Configuration for the evaluator
"""

from .point import Point, make_point
from .polygon import Polygon, make_polygon
from .options import EvaluationOptions, DistanceMode

__all__ = [
    # Point
    "Point",
    "make_point",

    # Polygon
    "Polygon",
    "make_polygon",

    # Options
    "EvaluationOptions",
    "DistanceMode",
]
