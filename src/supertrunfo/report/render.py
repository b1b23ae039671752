"""Text report: full field dump per card, then one winner line per attribute."""

from typing import List, Optional

from supertrunfo.cards.card import Card
from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.core.compare import AttributeComparison, compare_cards


def format_card(index: int, card: Card, config: Optional[Config] = None) -> str:
    """Field dump for one card, preceded by a blank line and the separator."""
    cfg = config or DEFAULT_CONFIG
    d = cfg.decimals
    lines = [
        "",
        cfg.separator,
        f"Carta {index}:",
        f"Estado: {card.state}",
        f"Codigo: {card.code}",
        f"Nome da Cidade: {card.city_name}",
        f"Populacao: {card.population}",
        f"Area: {card.area:.{d}f} km2",
        f"PIB: {card.output:.{d}f} bilhoes de reais",
        f"Numero de Pontos Turisticos: {card.tourist_spots}",
        f"Densidade Populacional: {card.population_density:.{d}f} hab/km2",
        f"PIB per Capita: {card.output_per_capita:.{d}f} reais",
        f"Super Poder: {card.super_power:.{d}f}",
    ]
    return "\n".join(lines)


def format_result(comparison: AttributeComparison) -> str:
    """e.g. 'Populacao: Carta 2 venceu (0)'."""
    return f"{comparison.label}: Carta {comparison.winner} venceu ({comparison.indicator})"


def format_comparison(comparisons: List[AttributeComparison], config: Optional[Config] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    lines = ["", cfg.separator, "Comparacao de Cartas:", ""]
    lines.extend(format_result(c) for c in comparisons)
    return "\n".join(lines)


def render_report(card_1: Card, card_2: Card, config: Optional[Config] = None) -> str:
    """Card 1 dump, card 2 dump, then the comparison section."""
    return "\n".join(
        [
            format_card(1, card_1, config),
            format_card(2, card_2, config),
            format_comparison(compare_cards(card_1, card_2), config),
        ]
    )
