"""Geometry input parsing utilities.

Supported formats:
- polygon CSV: one vertex per row, in ring order
- evaluation request JSON: {"point": {...}, "polygon": {...}, "options": {...}}

Coordinate columns/keys accept x/y, easting/northing or E/N.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from ..core.errors import InvalidInputError
from ..core.models.options import EvaluationOptions
from ..core.models.point import Point
from ..core.models.polygon import Polygon
from ..core.results.schemas import (
    EVALUATION_OPTIONS_SCHEMA,
    EVALUATION_REQUEST_SCHEMA,
    POINT_SCHEMA,
    POLYGON_SCHEMA,
    validate_json,
)

X_KEYS = ("x", "X", "easting", "E", "east")
Y_KEYS = ("y", "Y", "northing", "N", "north")


def _get(row: Dict[str, str], keys: Sequence[str], default: str = "") -> str:
    for k in keys:
        if k in row and row[k] is not None and row[k].strip() != "":
            return row[k].strip()
    return default


def parse_polygon_csv(path: str | Path) -> Polygon:
    """Parse a polygon from a CSV with one vertex per row.

    Expected columns (flexible):
      - x/easting/E
      - y/northing/N

    Rows are taken in file order. Blank rows are skipped.
    """

    path = Path(path)
    vertices: List[Tuple[str, str]] = []

    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for line_no, row in enumerate(reader, start=2):
            # Fields beyond the header land under the None key as a list
            if not any(isinstance(v, str) and v.strip() for k, v in row.items() if k is not None):
                continue
            x = _get(row, X_KEYS)
            y = _get(row, Y_KEYS)
            if not x or not y:
                raise InvalidInputError(f"Missing x/y coordinate on line {line_no} of {path}")
            vertices.append((x, y))

    return Polygon(tuple(vertices))


def _point_dict(data: Any) -> Dict[str, Any]:
    """Normalize a point given as {x, y} or [x, y]."""
    if isinstance(data, (list, tuple)) and len(data) == 2:
        return {"x": data[0], "y": data[1]}
    if isinstance(data, dict):
        return {
            "x": next((data[k] for k in X_KEYS if k in data), None),
            "y": next((data[k] for k in Y_KEYS if k in data), None),
        }
    raise InvalidInputError(f"Point must be an object or [x, y] pair, got {type(data).__name__}")


def _polygon_dict(data: Any) -> Dict[str, Any]:
    """Normalize a polygon given as {vertices: [...]} or a bare vertex list."""
    if isinstance(data, list):
        return {"vertices": data}
    if isinstance(data, dict):
        return data
    raise InvalidInputError(f"Polygon must be an object or vertex list, got {type(data).__name__}")


def _raise_on_errors(what: str, errors: List[str]) -> None:
    if errors:
        raise InvalidInputError(f"Invalid {what}: " + "; ".join(errors))


def parse_evaluation_request(data: Dict[str, Any]) -> Tuple[Point, Polygon, EvaluationOptions]:
    """Build (point, polygon, options) from a request dictionary.

    Raises:
        InvalidInputError: If the document does not match the request schema
            or the geometry is invalid
    """
    _raise_on_errors("request", validate_json(data, EVALUATION_REQUEST_SCHEMA))

    point_data = _point_dict(data["point"])
    _raise_on_errors("point", validate_json(point_data, POINT_SCHEMA))

    polygon_data = _polygon_dict(data["polygon"])
    _raise_on_errors("polygon", validate_json(polygon_data, POLYGON_SCHEMA))

    options_data = data.get("options") or {}
    _raise_on_errors("options", validate_json(options_data, EVALUATION_OPTIONS_SCHEMA))

    try:
        options = EvaluationOptions.from_dict(options_data)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid options: {exc}") from exc

    return Point.from_dict(point_data), Polygon.from_dict(polygon_data), options


def load_evaluation_request(path: str | Path) -> Tuple[Point, Polygon, EvaluationOptions]:
    """Read an evaluation request from a JSON file.

    Raises:
        InvalidInputError: If the file is not valid JSON or not a valid request
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_evaluation_request(data)
