"""HTML report generation.

Produces a standalone HTML report for an :class:`~planar_geometry.core.results.evaluation_result.EvaluationResult`,
optionally listing the evaluated point and polygon.
"""

from __future__ import annotations

import html

from ..models.point import Point
from ..models.polygon import Polygon
from ..results.evaluation_result import EvaluationResult


def render_html_report(
    result: EvaluationResult,
    point: Point | None = None,
    polygon: Polygon | None = None,
    title: str | None = None,
) -> str:
    """Render an :class:`EvaluationResult` as a standalone HTML document."""
    if title is None:
        title = "Polygon Evaluation Report"

    def esc(s: object) -> str:
        return html.escape(str(s))

    css = """
    body { font-family: Arial, sans-serif; margin: 24px; }
    h1 { margin-bottom: 4px; }
    .meta { color: #555; margin-bottom: 16px; }
    table { border-collapse: collapse; margin: 12px 0 24px 0; }
    th, td { border: 1px solid #ddd; padding: 6px 8px; font-size: 13px; }
    th { background: #f5f5f5; text-align: left; }
    .ok { color: #067d00; font-weight: bold; }
    .bad { color: #b00020; font-weight: bold; }
    """

    parts: list[str] = []
    parts.append("<!doctype html>")
    parts.append("<html><head><meta charset='utf-8'>")
    parts.append(f"<title>{esc(title)}</title>")
    parts.append(f"<style>{css}</style>")
    parts.append("</head><body>")

    parts.append(f"<h1>{esc(title)}</h1>")
    parts.append(
        f"<div class='meta'>Success: <span class='{'ok' if result.success else 'bad'}'>{esc(result.success)}</span> | "
        f"Distance mode: {esc(result.distance_mode)} | "
        f"Generated: {esc(result.timestamp)}</div>"
    )

    if not result.success:
        parts.append(f"<p class='bad'>{esc(result.error_message or 'Unknown error')}</p>")
    else:
        parts.append("<h2>Results</h2>")
        parts.append("<table><tbody>")
        parts.append(f"<tr><th>Area</th><td>{esc(result.area)}</td></tr>")
        parts.append(f"<tr><th>Distance</th><td>{esc(result.distance)}</td></tr>")
        parts.append(f"<tr><th>Contains</th><td>{esc(result.contains)}</td></tr>")
        parts.append("</tbody></table>")

    if point is not None:
        parts.append("<h2>Point</h2>")
        parts.append(f"<p>({esc(point.x)}, {esc(point.y)})</p>")

    if polygon is not None:
        parts.append(f"<h2>Polygon ({len(polygon.vertices)} vertices)</h2>")
        parts.append("<table><thead><tr><th>#</th><th>X</th><th>Y</th></tr></thead><tbody>")
        for i, v in enumerate(polygon.vertices):
            parts.append(f"<tr><td>{i}</td><td>{esc(v.x)}</td><td>{esc(v.y)}</td></tr>")
        parts.append("</tbody></table>")

    if result.messages:
        parts.append("<h2>Messages</h2><ul>")
        for msg in result.messages:
            parts.append(f"<li>{esc(msg)}</li>")
        parts.append("</ul>")

    parts.append("</body></html>")
    return "\n".join(parts)
