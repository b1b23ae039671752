"""Configuration with defaults for supertrunfo."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Default config: card domain, input caps, output scale and formatting."""

    # Card domain
    states: str = "ABCDEFGH"
    code_min: int = 1
    code_max: int = 4

    # Input caps
    city_name_max_len: int = 99
    population_max: int = 2**64 - 1  # unsigned 64-bit
    tourist_spots_min: int = -(2**63)
    tourist_spots_max: int = 2**63 - 1

    # PIB is entered in billions; per-capita is in base currency units
    output_scale: float = 1e9

    # Report formatting
    decimals: int = 2
    separator: str = "=" * 30


# Singleton default config; override via explicit args in APIs
DEFAULT_CONFIG = Config()
