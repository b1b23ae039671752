"""
Comparison chart: two card columns with every field, plus a winner strip per attribute.
"""

import logging
from pathlib import Path
from typing import List, Optional

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt

from supertrunfo.analysis.table import comparison_frame
from supertrunfo.cards.card import Card
from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.core.compare import compare_cards, count_wins

logger = logging.getLogger(__name__)

COLOR_1 = "#1a5276"
COLOR_2 = "#922b21"


def _card_lines(card: Card, decimals: int) -> List[str]:
    d = decimals
    return [
        f"Estado: {card.state}",
        f"Codigo: {card.code}",
        f"Populacao: {card.population}",
        f"Area: {card.area:.{d}f} km2",
        f"PIB: {card.output:.{d}f} bi",
        f"Pontos Turisticos: {card.tourist_spots}",
        f"Densidade: {card.population_density:.{d}f} hab/km2",
        f"PIB per Capita: {card.output_per_capita:.{d}f}",
        f"Super Poder: {card.super_power:.{d}f}",
    ]


def render_card_comparison(
    card_1: Card,
    card_2: Card,
    outpath: str = "outputs/card_compare.png",
    config: Optional[Config] = None,
) -> str:
    """Render the two cards side by side and an attribute winner strip. Returns the resolved path."""
    cfg = config or DEFAULT_CONFIG
    path = Path(outpath)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = comparison_frame(card_1, card_2)
    wins = count_wins(compare_cards(card_1, card_2))

    fig = plt.figure(figsize=(12, 9), dpi=150)
    fig.patch.set_facecolor("white")
    gs = fig.add_gridspec(3, 2, height_ratios=[0.6, 3, 2], left=0.06, right=0.94, top=0.95, bottom=0.05, wspace=0.25, hspace=0.3)

    ax_title = fig.add_subplot(gs[0, :])
    ax_title.axis("off")
    ax_title.text(0.5, 0.6, "Super Trunfo - Comparacao de Cartas", ha="center", va="center", fontsize=24, fontweight="bold", transform=ax_title.transAxes)
    ax_title.text(0.5, 0.1, f"Atributos vencidos: Carta 1 = {wins[1]}, Carta 2 = {wins[2]}", ha="center", va="center", fontsize=14, transform=ax_title.transAxes)

    for col, (index, card, color) in enumerate([(1, card_1, COLOR_1), (2, card_2, COLOR_2)]):
        ax = fig.add_subplot(gs[1, col])
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        ax.axis("off")
        _draw_card_column(ax, index, card, color, cfg.decimals)

    # Winner strip: one row per attribute, bar on the winning side
    ax_bar = fig.add_subplot(gs[2, :])
    labels = list(table["atributo"])
    y = list(range(len(labels)))[::-1]
    signs = [-1 if v == 1 else 1 for v in table["vencedor"]]
    colors = [COLOR_1 if v == 1 else COLOR_2 for v in table["vencedor"]]
    ax_bar.barh(y, signs, height=0.6, color=colors)
    ax_bar.set_yticks(y)
    ax_bar.set_yticklabels(labels, fontsize=11)
    ax_bar.set_xlim(-1.2, 1.2)
    ax_bar.set_xticks([-1, 1])
    ax_bar.set_xticklabels(["Carta 1 venceu", "Carta 2 venceu"], fontsize=11)
    ax_bar.axvline(0, color="#555555", linewidth=1)
    ax_bar.spines["top"].set_visible(False)
    ax_bar.spines["right"].set_visible(False)

    plt.savefig(path, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    logger.info("Saved comparison chart to %s", path)
    return str(path.resolve())


def _draw_card_column(ax: plt.Axes, index: int, card: Card, color: str, decimals: int) -> None:
    patch = mpatches.FancyBboxPatch(
        (0.02, 0.02), 0.96, 0.96,
        boxstyle="round,pad=0.02,rounding_size=0.03",
        facecolor="#fafafa", edgecolor=color, linewidth=2,
        transform=ax.transAxes,
    )
    ax.add_patch(patch)
    ax.text(0.5, 0.93, f"Carta {index}", ha="center", va="top", fontsize=20, fontweight="bold", color=color, transform=ax.transAxes)
    ax.text(0.5, 0.82, card.city_name, ha="center", va="top", fontsize=16, transform=ax.transAxes)
    y = 0.70
    for s in _card_lines(card, decimals):
        ax.text(0.5, y, s, ha="center", va="top", fontsize=12, transform=ax.transAxes)
        y -= 0.075
