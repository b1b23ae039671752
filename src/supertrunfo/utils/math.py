"""Math utilities for derived card metrics."""


def safe_div(a: float, b: float) -> float:
    """Return a/b or 0.0 if b is zero."""
    return a / b if b else 0.0
