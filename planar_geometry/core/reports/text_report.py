"""Plain-text rendering of an evaluation result.

Produces the three display labels (area, distance, contains) or, for a
failed evaluation, the error message alone.
"""

from __future__ import annotations

from ..results.evaluation_result import EvaluationResult

UNKNOWN_ERROR = "Unknown error"


def render_text_lines(result: EvaluationResult) -> list[str]:
    """Return the display lines for ``result``."""
    if not result.success:
        return [result.error_message or UNKNOWN_ERROR]
    return [
        f"Area: {result.area}",
        f"Distance: {result.distance}",
        f"Contains: {'true' if result.contains else 'false'}",
    ]


def render_text_report(result: EvaluationResult) -> str:
    """Render ``result`` as newline-separated display labels."""
    return "\n".join(render_text_lines(result))
