"""Tests for per-field input parsers."""

import pytest

from supertrunfo.collect.validate import (
    MSG_AREA,
    MSG_EMPTY,
    MSG_INT,
    MSG_REAL,
    MSG_UNSIGNED,
    code_message,
    parse_area,
    parse_city_name,
    parse_code,
    parse_output,
    parse_population,
    parse_state,
    parse_tourist_spots,
    state_message,
    strip_line,
)
from supertrunfo.config import Config


@pytest.mark.parametrize("letter", list("abcdefghABCDEFGH"))
def test_state_accepts_a_to_h_any_case(letter: str) -> None:
    result = parse_state(letter)
    assert result.ok
    assert result.value == letter.upper()


@pytest.mark.parametrize("text", ["i", "Z", "1", "#", "ab", "AA", " a", "é"])
def test_state_rejects_everything_else(text: str) -> None:
    result = parse_state(text)
    assert not result.ok
    assert result.error == state_message()
    assert result.error == "Valor invalido. Digite uma letra de A a H."


def test_state_respects_config_letters() -> None:
    cfg = Config(states="ABCD")
    assert parse_state("b", cfg).value == "B"
    result = parse_state("e", cfg)
    assert not result.ok
    assert result.error == "Valor invalido. Digite uma letra de A a D."


def test_code_message_follows_config() -> None:
    cfg = Config(code_max=9)
    assert parse_code("B09", "B", cfg).value == "B09"
    result = parse_code("B10", "B", cfg)
    assert result.error == "Codigo invalido. Use o formato B01 a B09 (ex: B01)."


def test_code_normalizes_prefix() -> None:
    result = parse_code("b03", "B")
    assert result.ok
    assert result.value == "B03"


@pytest.mark.parametrize("text", ["B01", "B02", "B03", "B04", "b04"])
def test_code_accepts_suffix_one_to_four(text: str) -> None:
    assert parse_code(text, "B").ok


@pytest.mark.parametrize("text", ["B05", "B00", "B99", "A01", "B1", "B001", "B0x", "Bx1", "B-1", ""])
def test_code_rejections(text: str) -> None:
    result = parse_code(text, "B")
    assert not result.ok
    assert result.error == code_message("B")
    assert result.error == "Codigo invalido. Use o formato B01 a B04 (ex: B01)."


def test_city_name_preserves_spaces() -> None:
    assert parse_city_name("  Sao  Paulo ").value == "  Sao  Paulo "


def test_city_name_empty_rejected() -> None:
    result = parse_city_name("")
    assert not result.ok
    assert result.error == MSG_EMPTY


def test_city_name_capped() -> None:
    assert len(parse_city_name("x" * 150).value) == 99


def test_strip_line_only_trailing_newlines() -> None:
    assert strip_line(" Recife\r\n") == " Recife"
    assert strip_line("Recife\n\n") == "Recife"


def test_population_parses() -> None:
    assert parse_population("123").value == 123
    assert parse_population("  42").value == 42
    assert parse_population("7 \t").value == 7
    assert parse_population("+7").value == 7
    assert parse_population("0").value == 0


def test_population_unsigned_64_bit_range() -> None:
    assert parse_population(str(2**64 - 1)).value == 2**64 - 1
    assert not parse_population(str(2**64)).ok


@pytest.mark.parametrize("text", ["10x", "-5", "1.5", "1e3", "1_000", "abc", "12 3", "٣"])
def test_population_rejections(text: str) -> None:
    result = parse_population(text)
    assert not result.ok
    assert result.error == MSG_UNSIGNED


def test_tourist_spots_signed() -> None:
    assert parse_tourist_spots("50").value == 50
    assert parse_tourist_spots("-5").value == -5
    assert parse_tourist_spots("0 ").value == 0


@pytest.mark.parametrize("text", ["10x", "2.5", "five", str(2**63)])
def test_tourist_spots_rejections(text: str) -> None:
    result = parse_tourist_spots(text)
    assert not result.ok
    assert result.error == MSG_INT


@pytest.mark.parametrize("text", ["0", "-5", "0.0", "-0.01"])
def test_area_non_positive_rejected_with_own_message(text: str) -> None:
    result = parse_area(text)
    assert not result.ok
    assert result.error == MSG_AREA


@pytest.mark.parametrize("text", ["10x", "abc", "inf", "nan", "0x10", "1e999", "1,5", "."])
def test_area_parse_failures(text: str) -> None:
    result = parse_area(text)
    assert not result.ok
    assert result.error == MSG_REAL


def test_area_accepts_positive_reals() -> None:
    assert parse_area("0.01").value == 0.01
    assert parse_area(".5").value == 0.5
    assert parse_area("5.").value == 5.0
    assert parse_area("1e3").value == 1000.0
    assert parse_area("12.5 ").value == 12.5


def test_output_accepts_negative() -> None:
    # Only the number format is checked for PIB.
    assert parse_output("-3.5").value == -3.5
    assert parse_output("0").value == 0.0


def test_output_rejects_trailing_suffix() -> None:
    result = parse_output("10x")
    assert not result.ok
    assert result.error == MSG_REAL
