"""Tests for the pandas card and comparison tables."""

import pandas as pd
import pytest

from supertrunfo.analysis.table import CARD_COLUMNS, cards_frame, comparison_frame
from supertrunfo.cards.card import Card


@pytest.fixture
def cards() -> tuple:
    c1 = Card(state="A", code="A01", city_name="Sao Paulo", population=1000, area=10.0, output=2.0, tourist_spots=4)
    c2 = Card(state="B", code="B01", city_name="Rio", population=500, area=10.0, output=3.0, tourist_spots=4)
    return c1, c2


def test_cards_frame(cards: tuple) -> None:
    df = cards_frame(*cards)
    assert list(df.columns) == CARD_COLUMNS
    assert list(df.index) == [1, 2]
    assert df.loc[1, "population_density"] == 100.0
    assert df.loc[2, "city_name"] == "Rio"


def test_comparison_frame(cards: tuple) -> None:
    df = comparison_frame(*cards)
    assert isinstance(df, pd.DataFrame)
    assert df.shape == (7, 6)
    assert df["atributo"].tolist()[0] == "Populacao"
    assert df.loc[df["menor_vence"], "atributo"].tolist() == ["Densidade Populacional"]
    row = df.set_index("atributo").loc["Densidade Populacional"]
    assert row["carta_1"] == 100.0
    assert row["carta_2"] == 50.0
    assert row["vencedor"] == 2
    assert row["resultado"] == 0
    # Tourist spots tied -> card 2
    assert df.set_index("atributo").loc["Pontos Turisticos", "vencedor"] == 2
    assert set(df["resultado"]) <= {0, 1}
