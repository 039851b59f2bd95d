"""
Decode failures.

Each one is terminal for the message being decoded. They are raised inside
the decoders and caught at Decoder.decode(), which reports None instead.
"""

from typing import Optional


class DecodeError(Exception):
    """Buffer does not hold a valid message for this protocol."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (offset {self.offset})"


class InsufficientSamples(DecodeError):
    """Too few durations recorded: noise or a partial capture."""


class TimingMismatch(DecodeError):
    """Duration is not a tolerance-matched multiple of the unit length."""


class BadStartPattern(DecodeError):
    """Start bit units are not MARK, SPACE(, MARK)."""


class BadHeader(DecodeError):
    """RC6 leader mark or space out of tolerance."""


class InconsistentDoubleWidthBit(DecodeError):
    """The two unit halves of the RC6 toggle bit differ in polarity."""


class InvalidTransition(DecodeError):
    """Unit pair encodes neither a 1 nor a 0."""
