"""Tests for the Streamlit form parsing (no UI is rendered)."""

from supertrunfo.app.streamlit_app import card_from_form

RAW = {
    "state": "c",
    "code": "c02",
    "city_name": "Curitiba",
    "population": "1963726",
    "area": "434.89",
    "output": "83.8",
    "tourist_spots": "20",
}


def test_card_from_form_valid() -> None:
    card, errors = card_from_form(RAW)
    assert errors == []
    assert card is not None
    assert card.code == "C02"
    assert card.population == 1963726


def test_card_from_form_collects_errors() -> None:
    card, errors = card_from_form({**RAW, "area": "0", "population": "10x"})
    assert card is None
    assert len(errors) == 2
    assert any(e.startswith("area:") for e in errors)
    assert any(e.startswith("population:") for e in errors)


def test_card_from_form_bad_state_skips_code() -> None:
    card, errors = card_from_form({**RAW, "state": "z"})
    assert card is None
    assert errors == ["state: Valor invalido. Digite uma letra de A a H."]
