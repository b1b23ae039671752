"""Card model and derived metrics."""

from supertrunfo.cards.card import Card, output_per_capita, population_density, super_power

__all__ = ["Card", "population_density", "output_per_capita", "super_power"]
