"""Demonstration fixture: one point evaluated against one quadrilateral.

The quadrilateral's closing edge (12, 20) -> (0, 0) crosses the edge
(0, 2) -> (2, 2) at (1.2, 2), so the ring is self-intersecting. Its area is
the plain shoelace value (6.0). The point (10, 8) lies outside.
"""

from __future__ import annotations

from .core.evaluator import evaluate_coordinates
from .core.models.options import EvaluationOptions
from .core.reports.text_report import render_text_report
from .core.results.evaluation_result import EvaluationResult

DEMO_POINT = (10, 8)
DEMO_POLYGON = ((0, 0), (0, 2), (2, 2), (12, 20))


def run_demo(options: EvaluationOptions | None = None) -> EvaluationResult:
    """Evaluate the demo point against the demo polygon."""
    return evaluate_coordinates(DEMO_POINT, DEMO_POLYGON, options)


def main() -> int:
    """Print the demo result labels; return 0 on success, 1 on failure."""
    result = run_demo()
    print(render_text_report(result))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
