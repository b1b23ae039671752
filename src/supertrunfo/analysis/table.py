"""
Tabular views of a match: one row per card, or one row per compared attribute.

Used by the Streamlit app and by the comparison chart.
"""

from dataclasses import asdict
from typing import List

import pandas as pd

from supertrunfo.cards.card import Card
from supertrunfo.core.compare import ATTRIBUTES, compare_cards

CARD_COLUMNS = [
    "state",
    "code",
    "city_name",
    "population",
    "area",
    "output",
    "tourist_spots",
    "population_density",
    "output_per_capita",
    "super_power",
]


def cards_frame(card_1: Card, card_2: Card) -> pd.DataFrame:
    """Base and derived fields of both cards, indexed by card number (1, 2)."""
    rows: List[dict] = [asdict(card_1), asdict(card_2)]
    df = pd.DataFrame(rows, columns=CARD_COLUMNS)
    df.index = pd.Index([1, 2], name="carta")
    return df


def comparison_frame(card_1: Card, card_2: Card) -> pd.DataFrame:
    """
    One row per attribute in report order.
    Columns: atributo, carta_1, carta_2, menor_vence, vencedor (1/2), resultado (1/0).
    """
    lower_wins = {spec.key: not spec.higher_is_better for spec in ATTRIBUTES}
    rows = [
        {
            "atributo": c.label,
            "carta_1": float(c.value_1),
            "carta_2": float(c.value_2),
            "menor_vence": lower_wins[c.key],
            "vencedor": c.winner,
            "resultado": c.indicator,
        }
        for c in compare_cards(card_1, card_2)
    ]
    return pd.DataFrame(rows, columns=["atributo", "carta_1", "carta_2", "menor_vence", "vencedor", "resultado"])
