"""Minimal Streamlit app: enter two cards, validate each field, show cards and comparison."""

from typing import Dict, List, Optional, Tuple

import streamlit as st

from supertrunfo.analysis.table import cards_frame, comparison_frame
from supertrunfo.cards.card import Card
from supertrunfo.collect.validate import (
    FieldResult,
    parse_area,
    parse_city_name,
    parse_code,
    parse_output,
    parse_population,
    parse_state,
    parse_tourist_spots,
    state_range,
)
from supertrunfo.config import DEFAULT_CONFIG
from supertrunfo.core.compare import compare_cards, count_wins
from supertrunfo.report.render import render_report

FIELD_LABELS = [
    ("state", f"Estado ({state_range()})"),
    ("code", "Codigo da Carta"),
    ("city_name", "Nome da Cidade"),
    ("population", "Populacao"),
    ("area", "Area (km2)"),
    ("output", "PIB (em bilhoes de reais)"),
    ("tourist_spots", "Numero de Pontos Turisticos"),
]


def card_from_form(raw: Dict[str, str]) -> Tuple[Optional[Card], List[str]]:
    """
    Parse raw form strings with the same field parsers as the terminal collector.
    Returns (card, []) when every field is valid, else (None, error messages).
    """
    errors: List[str] = []
    values: Dict[str, object] = {}

    def _take(name: str, result: FieldResult) -> None:
        if result.ok:
            values[name] = result.value
        else:
            errors.append(f"{name}: {result.error}")

    _take("state", parse_state(raw.get("state", "").strip()))
    if "state" in values:
        _take("code", parse_code(raw.get("code", "").strip(), values["state"]))
    _take("city_name", parse_city_name(raw.get("city_name", "")))
    _take("population", parse_population(raw.get("population", "")))
    _take("area", parse_area(raw.get("area", "")))
    _take("output", parse_output(raw.get("output", "")))
    _take("tourist_spots", parse_tourist_spots(raw.get("tourist_spots", "")))
    if errors or "code" not in values:
        return None, errors
    return Card(**values), []


def _card_form(index: int) -> Dict[str, str]:
    st.subheader(f"Carta {index}")
    return {name: st.text_input(label, key=f"c{index}_{name}") for name, label in FIELD_LABELS}


def run_app() -> None:
    """Run Streamlit UI."""
    st.title("Super Trunfo - Paises")
    st.write("Cadastre duas cartas e compare atributo por atributo.")

    col_1, col_2 = st.columns(2)
    with col_1:
        raw_1 = _card_form(1)
    with col_2:
        raw_2 = _card_form(2)

    if st.button("Comparar"):
        card_1, errors_1 = card_from_form(raw_1)
        card_2, errors_2 = card_from_form(raw_2)
        for msg in errors_1:
            st.error(f"Carta 1 - {msg}")
        for msg in errors_2:
            st.error(f"Carta 2 - {msg}")
        if card_1 is None or card_2 is None:
            return
        st.subheader("Cartas")
        st.dataframe(cards_frame(card_1, card_2), use_container_width=True)
        st.subheader("Comparacao de Cartas")
        st.dataframe(comparison_frame(card_1, card_2), use_container_width=True)
        wins = count_wins(compare_cards(card_1, card_2))
        st.write(f"**Carta 1**: {wins[1]} atributos | **Carta 2**: {wins[2]} atributos")
        with st.expander("Relatorio em texto"):
            st.code(render_report(card_1, card_2, DEFAULT_CONFIG))


if __name__ == "__main__":
    run_app()
