"""
Per-field parsers for card input. Pure functions: text in, FieldResult out.

Every numeric parser requires the whole line to be consumed (only trailing spaces/tabs
are ignored), so "123abc" never truncates to 123.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

from supertrunfo.config import Config, DEFAULT_CONFIG

MSG_EMPTY = "Entrada vazia. Tente novamente."
MSG_STATE = "Valor invalido. Digite uma letra de {letters}."
MSG_CODE = "Codigo invalido. Use o formato {lo} a {hi} (ex: {lo})."
MSG_UNSIGNED = "Valor invalido. Digite um numero inteiro (ex: 123)."
MSG_INT = "Valor invalido. Digite um numero inteiro (ex: 50)."
MSG_REAL = "Valor invalido. Digite um numero (use ponto, ex: 12.5)."
MSG_AREA = "Area invalida. Digite um valor maior que 0."

_UNSIGNED_RE = re.compile(r"\s*\+?(\d+)[ \t]*", re.ASCII)
_INT_RE = re.compile(r"\s*([+-]?\d+)[ \t]*", re.ASCII)
_REAL_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[ \t]*", re.ASCII)


@dataclass(frozen=True)
class FieldResult:
    """Outcome of one parse attempt: a value, or the message to show before re-prompting."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _accept(value: Any) -> FieldResult:
    return FieldResult(value=value)


def _reject(message: str) -> FieldResult:
    return FieldResult(error=message)


def strip_line(line: str) -> str:
    """Drop trailing newline/carriage-return characters only."""
    return line.rstrip("\r\n")


def state_range(config: Optional[Config] = None) -> str:
    """Letter range shown to the user, e.g. 'A a H'."""
    cfg = config or DEFAULT_CONFIG
    return f"{cfg.states[0]} a {cfg.states[-1]}"


def code_example(state: str, config: Optional[Config] = None, number: Optional[int] = None) -> str:
    """Code for `state` with a two-digit suffix; code_min unless `number` is given."""
    cfg = config or DEFAULT_CONFIG
    return f"{state}{cfg.code_min if number is None else number:02d}"


def state_message(config: Optional[Config] = None) -> str:
    return MSG_STATE.format(letters=state_range(config))


def code_message(state: str, config: Optional[Config] = None) -> str:
    cfg = config or DEFAULT_CONFIG
    return MSG_CODE.format(lo=code_example(state, cfg), hi=code_example(state, cfg, cfg.code_max))


def parse_state(text: str, config: Optional[Config] = None) -> FieldResult:
    """One letter, case-insensitive, within config.states. Returns the uppercase letter."""
    cfg = config or DEFAULT_CONFIG
    if len(text) == 1 and text.isalpha() and text.upper() in cfg.states:
        return _accept(text.upper())
    return _reject(state_message(cfg))


def parse_code(text: str, state: str, config: Optional[Config] = None) -> FieldResult:
    """
    Three characters: state letter (any case), then two digits in [code_min, code_max].
    Returns the code with the prefix uppercased, e.g. "b03" -> "B03".
    """
    cfg = config or DEFAULT_CONFIG
    if len(text) == 3:
        prefix = text[0].upper()
        digits = text[1:]
        if prefix == state and digits.isascii() and digits.isdigit():
            if cfg.code_min <= int(digits) <= cfg.code_max:
                return _accept(prefix + digits)
    return _reject(code_message(state, cfg))


def parse_city_name(text: str, config: Optional[Config] = None) -> FieldResult:
    """Any non-empty line; spaces kept as typed, capped at city_name_max_len characters."""
    cfg = config or DEFAULT_CONFIG
    if not text:
        return _reject(MSG_EMPTY)
    return _accept(text[: cfg.city_name_max_len])


def parse_population(text: str, config: Optional[Config] = None) -> FieldResult:
    """Unsigned decimal integer up to population_max."""
    cfg = config or DEFAULT_CONFIG
    m = _UNSIGNED_RE.fullmatch(text)
    if m is None:
        return _reject(MSG_UNSIGNED)
    value = int(m.group(1))
    if value > cfg.population_max:
        return _reject(MSG_UNSIGNED)
    return _accept(value)


def parse_tourist_spots(text: str, config: Optional[Config] = None) -> FieldResult:
    """Signed decimal integer within the 64-bit range."""
    cfg = config or DEFAULT_CONFIG
    m = _INT_RE.fullmatch(text)
    if m is None:
        return _reject(MSG_INT)
    value = int(m.group(1))
    if not cfg.tourist_spots_min <= value <= cfg.tourist_spots_max:
        return _reject(MSG_INT)
    return _accept(value)


def parse_real(text: str) -> FieldResult:
    """Finite decimal real (sign, fraction and exponent allowed). No inf/nan, no hex."""
    m = _REAL_RE.fullmatch(text)
    if m is None:
        return _reject(MSG_REAL)
    value = float(m.group(1))
    if not math.isfinite(value):
        # e.g. "1e999"
        return _reject(MSG_REAL)
    return _accept(value)


def parse_area(text: str) -> FieldResult:
    """Real number strictly greater than zero; non-positive gets its own message."""
    result = parse_real(text)
    if not result.ok:
        return result
    if result.value <= 0:
        return _reject(MSG_AREA)
    return result


def parse_output(text: str) -> FieldResult:
    """PIB in billions. Negative values are accepted; only the number format is checked."""
    return parse_real(text)
