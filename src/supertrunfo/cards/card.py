"""
Card model and derived metrics: population density, PIB per capita, super power.

Derived fields are computed once in __post_init__ from the five base fields and the
frozen dataclass keeps them from changing afterwards.
"""

from dataclasses import InitVar, dataclass, field
from typing import Optional

from supertrunfo.config import Config, DEFAULT_CONFIG
from supertrunfo.utils.math import safe_div


def population_density(population: int, area: float) -> float:
    """Inhabitants per km2; 0.0 when population is zero."""
    return safe_div(population, area)


def output_per_capita(output: float, population: int, scale: float = DEFAULT_CONFIG.output_scale) -> float:
    """PIB (billions) converted to base currency units per inhabitant; 0.0 when population is zero."""
    return safe_div(output * scale, population)


def super_power(
    population: int,
    area: float,
    output: float,
    tourist_spots: int,
    per_capita: float,
    density: float,
) -> float:
    """
    Composite score: plain sum of population, area, PIB, tourist spots, per-capita PIB
    and inverse density (0 when density is 0). Units are mixed on purpose; do not normalize.
    """
    inverse_density = 1.0 / density if density > 0 else 0.0
    return float(population) + area + output + float(tourist_spots) + per_capita + inverse_density


@dataclass(frozen=True)
class Card:
    """One country/city card. Base fields come from input; derived fields are never passed in."""

    state: str
    code: str
    city_name: str
    population: int
    area: float
    output: float  # PIB, billions of reais
    tourist_spots: int

    population_density: float = field(init=False)
    output_per_capita: float = field(init=False)
    super_power: float = field(init=False)

    # Checks follow this config (card domain, city-name cap, output scale); not stored
    config: InitVar[Optional[Config]] = None

    def __post_init__(self, config: Optional[Config]) -> None:
        cfg = config or DEFAULT_CONFIG
        if len(self.state) != 1 or self.state not in cfg.states:
            raise ValueError(f"state must be one of {cfg.states}, got {self.state!r}")
        digits = self.code[1:]
        if (
            len(self.code) != 3
            or self.code[0] != self.state
            or not (digits.isascii() and digits.isdigit())
            or not cfg.code_min <= int(digits) <= cfg.code_max
        ):
            raise ValueError(
                f"code must be {self.state}{cfg.code_min:02d}..{self.state}{cfg.code_max:02d}, got {self.code!r}"
            )
        if not self.city_name:
            raise ValueError("city_name must not be empty")
        if len(self.city_name) > cfg.city_name_max_len:
            raise ValueError(f"city_name longer than {cfg.city_name_max_len} characters")
        if self.population < 0:
            raise ValueError(f"population must be >= 0, got {self.population}")
        if not self.area > 0:
            raise ValueError(f"area must be > 0, got {self.area}")

        density = population_density(self.population, self.area)
        per_capita = output_per_capita(self.output, self.population, cfg.output_scale)
        # frozen: derived fields are written exactly once, here
        object.__setattr__(self, "population_density", density)
        object.__setattr__(self, "output_per_capita", per_capita)
        object.__setattr__(
            self,
            "super_power",
            super_power(self.population, self.area, self.output, self.tourist_spots, per_capita, density),
        )
