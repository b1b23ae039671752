"""Utilities for math."""

from supertrunfo.utils.math import safe_div

__all__ = ["safe_div"]
