"""Report renderers for evaluation results."""

from .text_report import render_text_lines, render_text_report
from .html_report import render_html_report

__all__ = [
    "render_text_lines",
    "render_text_report",
    "render_html_report",
]
