"""Analysis: pandas tables for cards and comparisons."""

from supertrunfo.analysis.table import cards_frame, comparison_frame

__all__ = ["cards_frame", "comparison_frame"]
