"""Geometry input parsing (CSV polygons, JSON evaluation requests)."""

from .geometry_io import (
    parse_polygon_csv,
    parse_evaluation_request,
    load_evaluation_request,
)

__all__ = [
    "parse_polygon_csv",
    "parse_evaluation_request",
    "load_evaluation_request",
]
