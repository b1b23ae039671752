"""
Input Collector: prompt for each card field until it parses, then build the Card.

Malformed input prints a field-specific message and re-prompts the same field.
End of input raises InputClosedError; the caller decides how to exit.
"""

import logging
from typing import Any, Callable, Optional

from supertrunfo.cards.card import Card
from supertrunfo.collect.errors import InputClosedError
from supertrunfo.collect.validate import (
    MSG_EMPTY,
    FieldResult,
    code_example,
    parse_area,
    parse_city_name,
    parse_code,
    parse_output,
    parse_population,
    parse_state,
    parse_tourist_spots,
    state_range,
    strip_line,
)
from supertrunfo.config import Config, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

EOF_MESSAGE = "Entrada encerrada (EOF). Finalizando."

# read(prompt) -> line; raises EOFError when the stream is exhausted (same contract as input())
Reader = Callable[[str], str]


def read_line(prompt: str, read: Reader, *, field: str = "", card_index: Optional[int] = None) -> str:
    """Return the next non-empty line (trailing CR/LF removed). Empty lines are re-prompted."""
    while True:
        try:
            line = read(prompt)
        except EOFError:
            raise InputClosedError(EOF_MESSAGE, field=field, card_index=card_index) from None
        line = strip_line(line)
        if line:
            return line
        print(MSG_EMPTY)


def ask(
    prompt: str,
    parse: Callable[[str], FieldResult],
    read: Reader,
    *,
    field: str = "",
    card_index: Optional[int] = None,
) -> Any:
    """Prompt, parse, and repeat until parse accepts the line."""
    while True:
        line = read_line(prompt, read, field=field, card_index=card_index)
        result = parse(line)
        if result.ok:
            return result.value
        logger.debug("Rejected %s for card %s: %r", field, card_index, line)
        print(result.error)


def collect_card(index: int, *, read: Reader = input, config: Optional[Config] = None) -> Card:
    """Collect and validate every base field of card `index`, returning a finalized Card."""
    cfg = config or DEFAULT_CONFIG
    print(f"=== Cadastro da Carta {index} ===")

    def _ask(prompt: str, parse: Callable[[str], FieldResult], field: str) -> Any:
        return ask(prompt, parse, read, field=field, card_index=index)

    state = _ask(f"Estado ({state_range(cfg)}): ", lambda s: parse_state(s, cfg), "state")
    code = _ask(f"Codigo da Carta (ex: {code_example(state, cfg)}): ", lambda s: parse_code(s, state, cfg), "code")
    city_name = _ask("Nome da Cidade: ", lambda s: parse_city_name(s, cfg), "city_name")
    population = _ask("Populacao: ", lambda s: parse_population(s, cfg), "population")
    area = _ask("Area (km2): ", parse_area, "area")
    output = _ask("PIB (em bilhoes de reais): ", parse_output, "output")
    tourist_spots = _ask("Numero de Pontos Turisticos: ", lambda s: parse_tourist_spots(s, cfg), "tourist_spots")

    card = Card(
        state=state,
        code=code,
        city_name=city_name,
        population=population,
        area=area,
        output=output,
        tourist_spots=tourist_spots,
        config=cfg,
    )
    logger.info("Collected card %d: %s %s (%s)", index, card.code, card.city_name, card.state)
    return card
