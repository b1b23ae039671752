"""Text rendering of cards and comparison results."""

from supertrunfo.report.render import format_card, format_comparison, format_result, render_report

__all__ = ["format_card", "format_comparison", "format_result", "render_report"]
