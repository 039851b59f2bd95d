"""
Level quantizer for Manchester-coded IR protocols.

RC5/RC6 decoding is easier if the data is broken into unit time intervals.
If the buffer holds a MARK of two units followed by a SPACE of one unit,
successive calls to DecodeCursor.next_level() return MARK, MARK, SPACE.
"""

import logging
from enum import IntEnum
from typing import Sequence

from .errors import TimingMismatch
from .timing import DEFAULT_MATCHER, TimingMatcher

# Module-level logger
_logger = logging.getLogger(__name__)

# A single raw duration may hold at most this many units
MAX_UNITS = 3


class Level(IntEnum):
    SPACE = 0
    MARK = 1


class DecodeCursor:
    """
    Position within a raw duration buffer, measured in unit intervals.

    `offset` indexes the buffer; `used` counts the units already consumed
    from buffer[offset]. Odd offsets hold marks and even offsets hold spaces;
    index 0 is the gap before the message.
    """

    def __init__(
        self,
        raw: Sequence[int],
        t1: int,
        offset: int = 1,
        matcher: TimingMatcher = DEFAULT_MATCHER,
    ):
        """
        Initialize cursor.

        Args:
            raw: Raw duration buffer (µs)
            t1: Unit duration of the protocol (µs)
            offset: Starting index (1 skips the leading gap)
            matcher: Tolerance window for unit multiples
        """
        self.raw = raw
        self.t1 = t1
        self.offset = offset
        self.used = 0
        self.matcher = matcher

    @property
    def exhausted(self) -> bool:
        return self.offset >= len(self.raw)

    @property
    def level(self) -> Level:
        """Polarity of the duration at the current offset."""
        return Level.MARK if self.offset % 2 else Level.SPACE

    def units_available(self) -> int:
        """
        Number of unit intervals in the duration at the current offset.

        Raises:
            TimingMismatch: Duration is not 1, 2 or 3 units long
        """
        width = int(self.raw[self.offset])
        correction = self.matcher.mark_excess if self.level == Level.MARK else -self.matcher.mark_excess
        for units in range(1, MAX_UNITS + 1):
            if self.matcher.match(width, units * self.t1 + correction):
                return units
        raise TimingMismatch(
            f"{self.level.name} of {width}us is not a multiple of {self.t1}us",
            self.offset,
        )

    def next_level(self) -> Level:
        """
        Consume one unit interval and return its polarity.

        After the end of the recorded buffer the line is idle, so SPACE is
        returned without advancing.
        """
        if self.exhausted:
            return Level.SPACE

        level = self.level
        avail = self.units_available()

        self.used += 1
        if self.used >= avail:
            self.used = 0
            self.offset += 1

        _logger.debug(level.name)
        return level

    def __repr__(self) -> str:
        return f"DecodeCursor(offset={self.offset}, used={self.used}, t1={self.t1})"
