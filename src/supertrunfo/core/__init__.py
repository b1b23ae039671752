"""Core logic: attribute comparison between two cards."""

from supertrunfo.core.compare import (
    ATTRIBUTES,
    AttributeComparison,
    AttributeSpec,
    card1_wins,
    compare_cards,
    count_wins,
)

__all__ = ["ATTRIBUTES", "AttributeSpec", "AttributeComparison", "card1_wins", "compare_cards", "count_wins"]
