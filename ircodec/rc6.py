"""
Philips RC6 codec.

A 2666µs leader mark and 889µs space are followed by a start bit (MARK,
SPACE) and the data bits, each two unit intervals of 444µs. Polarity is the
reverse of RC5: a 1 is MARK then SPACE. Data bit 3, the trailer (toggle)
bit, is sent at twice the unit width. Flipping the toggle bit between key
presses is left to the caller.
"""

from typing import Sequence

from . import RC6_TOGGLE_INDEX
from .codec import Decoder, Encoder
from .errors import BadHeader, InconsistentDoubleWidthBit, InsufficientSamples, InvalidTransition
from .levels import DecodeCursor, Level
from .protocols import RC6_TIMING


class RC6Decoder(Decoder):
    """RC6 decoder over a raw duration buffer."""

    default_timing = RC6_TIMING

    def _check_header(self, raw: Sequence[int]):
        if len(raw) < 3:
            raise InsufficientSamples(f"{len(raw)} samples, no room for a header")
        # Leader widths are not unit multiples, so they bypass the quantizer
        if not self.matcher.match_mark(int(raw[1]), self.timing.header_mark):
            raise BadHeader(f"Bad header mark {raw[1]}us", 1)
        if not self.matcher.match_space(int(raw[2]), self.timing.header_space):
            raise BadHeader(f"Bad header space {raw[2]}us", 2)

    @staticmethod
    def _half_bit(cursor: DecodeCursor, double: bool) -> Level:
        level = cursor.next_level()
        if double:
            offset = cursor.offset
            second = cursor.next_level()
            if second != level:
                raise InconsistentDoubleWidthBit(
                    f"Trailer bit halves differ: {level.name}, {second.name}",
                    offset,
                )
        return level

    def _decode_bits(self, raw: Sequence[int]) -> tuple[int, int]:
        self._check_header(raw)

        cursor = self._cursor(raw, offset=3)
        self._expect_start(cursor, Level.MARK, Level.SPACE)

        value = 0
        nbits = 0
        while not cursor.exhausted:
            offset = cursor.offset
            double = nbits == RC6_TOGGLE_INDEX
            level_a = self._half_bit(cursor, double)
            level_b = self._half_bit(cursor, double)

            if level_a == Level.MARK and level_b == Level.SPACE:
                value = (value << 1) | 1
            elif level_a == Level.SPACE and level_b == Level.MARK:
                value <<= 1
            else:
                raise InvalidTransition(
                    f"Invalid Manchester transition {level_a.name}, {level_b.name} at bit {nbits}",
                    offset,
                )
            nbits += 1

        if nbits == 0:
            raise InsufficientSamples("No data bits after the start bit", cursor.offset)

        return nbits, value


class RC6Encoder(Encoder):
    """RC6 mode 0 pulse generator."""

    default_timing = RC6_TIMING

    def _send_bits(self, value: int, nbits: int):
        tx = self.transmitter
        t1 = self.timing.t1

        # Header
        tx.mark(self.timing.header_mark)
        tx.space(self.timing.header_space)

        # Start bit
        tx.mark(t1)
        tx.space(t1)

        for index in range(nbits):
            bit = (value >> (nbits - 1 - index)) & 1
            t = 2 * t1 if index == RC6_TOGGLE_INDEX else t1
            if bit:
                tx.mark(t)
                tx.space(t)
            else:
                tx.space(t)
                tx.mark(t)
