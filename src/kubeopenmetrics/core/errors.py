"""Errors raised by the conversion core."""


class DecodeError(ValueError):
    """Raised when a resource list cannot be decoded.

    Attributes:
        reason: Short description of what was wrong with the input.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"cannot decode resource list: {reason}")
        self.reason = reason
