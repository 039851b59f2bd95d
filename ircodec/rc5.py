"""
Philips RC5 codec.

Every bit is two unit intervals of 889µs: a 1 is SPACE then MARK, a 0 is
MARK then SPACE. The message opens with a start bit sent as MARK, SPACE,
MARK. The first bit must be a one.
"""

from typing import Sequence

from .codec import Decoder, Encoder
from .errors import InvalidTransition
from .levels import Level
from .protocols import RC5_TIMING


class RC5Decoder(Decoder):
    """RC5 decoder over a raw duration buffer."""

    default_timing = RC5_TIMING

    def _decode_bits(self, raw: Sequence[int]) -> tuple[int, int]:
        cursor = self._cursor(raw)
        self._expect_start(cursor, Level.MARK, Level.SPACE, Level.MARK)

        value = 0
        nbits = 0
        while not cursor.exhausted:
            offset = cursor.offset
            level_a = cursor.next_level()
            level_b = cursor.next_level()

            if level_a == Level.SPACE and level_b == Level.MARK:
                value = (value << 1) | 1
            elif level_a == Level.MARK and level_b == Level.SPACE:
                value <<= 1
            else:
                raise InvalidTransition(
                    f"Invalid Manchester transition {level_a.name}, {level_b.name} at bit {nbits}",
                    offset,
                )
            nbits += 1

        return nbits, value


class RC5Encoder(Encoder):
    """RC5 pulse generator."""

    default_timing = RC5_TIMING

    def _send_bits(self, value: int, nbits: int):
        tx = self.transmitter
        t1 = self.timing.t1

        # Start
        tx.mark(t1)
        tx.space(t1)
        tx.mark(t1)

        mask = 1 << (nbits - 1)
        while mask:
            if value & mask:
                tx.space(t1)
                tx.mark(t1)
            else:
                tx.mark(t1)
                tx.space(t1)
            mask >>= 1
