"""Input-layer exceptions."""


class InputClosedError(Exception):
    """Raised when the input stream ends before every field of both cards was read."""

    def __init__(self, message: str, *, field: str | None = None, card_index: int | None = None) -> None:
        super().__init__(message)
        self.field = field or ""
        self.card_index = card_index
