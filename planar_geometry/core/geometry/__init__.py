"""Geometry queries for points and simple polygons."""

from .measures import (
    area,
    signed_area,
    perimeter,
    distance,
    contains,
    on_boundary,
    point_segment_distance,
)

__all__ = [
    "area",
    "signed_area",
    "perimeter",
    "distance",
    "contains",
    "on_boundary",
    "point_segment_distance",
]
