"""
Single source of truth for card-vs-card comparison.

Card 1 wins an attribute only on strict inequality in its favour; equal values go to
card 2 (there is no TIE result). Density is the one attribute where lower wins.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from supertrunfo.cards.card import Card


@dataclass(frozen=True)
class AttributeSpec:
    """One comparable card attribute: Card field name, report label, direction."""

    key: str
    label: str
    higher_is_better: bool = True


# Fixed report order
ATTRIBUTES: Tuple[AttributeSpec, ...] = (
    AttributeSpec("population", "Populacao"),
    AttributeSpec("area", "Area"),
    AttributeSpec("output", "PIB"),
    AttributeSpec("tourist_spots", "Pontos Turisticos"),
    AttributeSpec("population_density", "Densidade Populacional", higher_is_better=False),
    AttributeSpec("output_per_capita", "PIB per Capita"),
    AttributeSpec("super_power", "Super Poder"),
)


@dataclass(frozen=True)
class AttributeComparison:
    """Result of comparing one attribute between card 1 and card 2."""

    key: str
    label: str
    value_1: float
    value_2: float
    card1_wins: bool

    @property
    def winner(self) -> int:
        return 1 if self.card1_wins else 2

    @property
    def indicator(self) -> int:
        """1 if card 1 won, 0 if card 2 won."""
        return 1 if self.card1_wins else 0


def card1_wins(a: float, b: float, *, higher_is_better: bool = True) -> bool:
    """True only when a strictly beats b. If higher_is_better=False, lower wins."""
    if higher_is_better:
        return a > b
    return a < b


def compare_cards(card_1: Card, card_2: Card) -> List[AttributeComparison]:
    """Compare all attributes in ATTRIBUTES order."""
    out = []
    for spec in ATTRIBUTES:
        v1 = getattr(card_1, spec.key)
        v2 = getattr(card_2, spec.key)
        out.append(
            AttributeComparison(
                key=spec.key,
                label=spec.label,
                value_1=v1,
                value_2=v2,
                card1_wins=card1_wins(v1, v2, higher_is_better=spec.higher_is_better),
            )
        )
    return out


def count_wins(comparisons: List[AttributeComparison]) -> Dict[int, int]:
    """Number of attributes won per card number: {1: n1, 2: n2}."""
    wins_1 = sum(1 for c in comparisons if c.card1_wins)
    return {1: wins_1, 2: len(comparisons) - wins_1}
