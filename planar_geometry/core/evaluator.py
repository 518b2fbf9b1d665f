"""planar_geometry.core.evaluator

Single entry point that runs area, distance and containment for one point
and one polygon and returns an :class:`EvaluationResult`.

Either all three values are returned or the result carries one error
message. Geometry and arithmetic errors are caught here and never
propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .errors import GeometryError, InvalidInputError
from .geometry.measures import area, contains, distance
from .models.options import EvaluationOptions
from .models.point import Point, make_point
from .models.polygon import Polygon, make_polygon
from .results.evaluation_result import EvaluationResult

logger = logging.getLogger(__name__)


def evaluate(
    point: Point,
    polygon: Polygon,
    options: EvaluationOptions | None = None,
) -> EvaluationResult:
    """Evaluate area, distance and containment.

    Args:
        point: Query point
        polygon: Polygon to measure and test against
        options: Evaluation options (defaults to ``EvaluationOptions()``)

    Returns:
        EvaluationResult with all three values on success, or
        ``EvaluationResult.failure(message)`` if any query fails.
    """
    options = options or EvaluationOptions()
    mode = options.distance_mode.value

    try:
        a = area(polygon)
        d = distance(point, polygon, options.distance_mode, options.boundary_tolerance)
        c = contains(polygon, point, options.boundary_tolerance)
    except (GeometryError, ArithmeticError) as exc:
        logger.warning("Evaluation failed: %s", exc)
        result = EvaluationResult.failure(str(exc) or type(exc).__name__)
        result.distance_mode = mode
        return result

    logger.debug(
        "Evaluated %r against %r: area=%s distance=%s (%s) contains=%s",
        point, polygon, a, d, mode, c,
    )

    result = EvaluationResult(
        success=True,
        area=a,
        distance=d,
        contains=c,
        distance_mode=mode,
        num_vertices=len(polygon.vertices),
    )
    if polygon.num_distinct_vertices < len(polygon.vertices):
        result.messages.append("Polygon has repeated vertices")
    return result


def evaluate_coordinates(
    point_xy: Sequence[Any],
    vertices: Iterable[Sequence[Any]],
    options: EvaluationOptions | None = None,
) -> EvaluationResult:
    """Build a Point and Polygon from raw coordinates, then :func:`evaluate`.

    Construction errors are returned as a failed result.
    """
    try:
        if len(point_xy) != 2:
            raise InvalidInputError(f"Point must have exactly 2 coordinates, got {len(point_xy)}")
        point = make_point(point_xy[0], point_xy[1])
        polygon = make_polygon(vertices)
    except (GeometryError, TypeError) as exc:
        logger.warning("Invalid input: %s", exc)
        return EvaluationResult.failure(str(exc))

    return evaluate(point, polygon, options)
