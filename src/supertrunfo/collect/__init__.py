"""Input Collector: field parsers, retry loops and end-of-input error."""

from supertrunfo.collect.collector import collect_card
from supertrunfo.collect.errors import InputClosedError
from supertrunfo.collect.validate import FieldResult

__all__ = ["collect_card", "InputClosedError", "FieldResult"]
