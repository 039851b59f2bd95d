"""
Base classes shared by the RC5 and RC6 codecs.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .capture import as_raw_buffer
from .errors import DecodeError, InsufficientSamples, BadStartPattern
from .levels import DecodeCursor, Level
from .protocols import Protocol, ProtocolTiming
from .timing import DEFAULT_MATCHER, TimingMatcher
from .transmit import Transmitter

# Module-level logger
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """One fully decoded message."""

    bits: int
    value: int
    protocol: Protocol

    def __str__(self) -> str:
        width = max(1, (self.bits + 3) // 4)
        return f"{self.protocol} {self.bits} bits 0x{self.value:0{width}X}"


class Decoder:
    """
    Decodes one message from a raw duration buffer.

    Subclasses set `default_timing` and implement `_decode_bits()`.
    """

    default_timing: ProtocolTiming

    def __init__(
        self,
        timing: Optional[ProtocolTiming] = None,
        matcher: TimingMatcher = DEFAULT_MATCHER,
    ):
        """
        Initialize decoder.

        Args:
            timing: Protocol timings (None for the protocol defaults)
            matcher: Tolerance window used for every duration
        """
        self.timing = timing or self.default_timing
        self.matcher = matcher
        # Failure of the most recent decode() call, None after a success
        self.error: Optional[DecodeError] = None

    @property
    def protocol(self) -> Protocol:
        return self.timing.protocol

    def decode(self, raw: Sequence[int]) -> Optional[DecodeResult]:
        """
        Decode a raw duration buffer.

        Args:
            raw: Durations in µs; index 0 is the gap before the message

        Returns:
            DecodeResult if the buffer holds a valid message, None otherwise.
            The reason for a failure is kept in `self.error`.
        """
        try:
            return self.decode_or_raise(raw)
        except DecodeError as e:
            self.error = e
            _logger.debug(f"{self.protocol} decode failed: {e}")
            return None

    def decode_or_raise(self, raw: Sequence[int]) -> DecodeResult:
        """
        Decode a raw duration buffer, raising on failure.

        Raises:
            DecodeError: Buffer does not hold a valid message
            ValueError: Buffer is not a sequence of non-negative integers
        """
        self.error = None
        raw = as_raw_buffer(raw)

        if len(raw) < self.timing.min_samples:
            raise InsufficientSamples(
                f"{len(raw)} samples, need at least {self.timing.min_samples}"
            )

        bits, value = self._decode_bits(raw)
        result = DecodeResult(bits=bits, value=value, protocol=self.protocol)
        _logger.debug(f"Decoded {result}")
        return result

    def _cursor(self, raw: Sequence[int], offset: int = 1) -> DecodeCursor:
        return DecodeCursor(raw, self.timing.t1, offset=offset, matcher=self.matcher)

    @staticmethod
    def _expect_start(cursor: DecodeCursor, *levels: Level):
        for expected in levels:
            offset = cursor.offset
            level = cursor.next_level()
            if level != expected:
                raise BadStartPattern(
                    f"Missing start bit: expected {expected.name}, got {level.name}",
                    offset,
                )

    def _decode_bits(self, raw: Sequence[int]) -> tuple[int, int]:
        """Return (bit count, value) of the message in `raw`."""
        raise NotImplementedError


class Encoder:
    """
    Generates the pulse train of one message on a Transmitter.

    Subclasses set `default_timing` and implement `_send_bits()`.
    """

    default_timing: ProtocolTiming

    def __init__(self, transmitter: Transmitter, timing: Optional[ProtocolTiming] = None):
        """
        Initialize encoder.

        Args:
            transmitter: Receives the carrier setup and mark/space calls
            timing: Protocol timings (None for the protocol defaults)
        """
        self.transmitter = transmitter
        self.timing = timing or self.default_timing

    @property
    def protocol(self) -> Protocol:
        return self.timing.protocol

    def send(self, value: int, nbits: int):
        """
        Transmit `value` as an `nbits` message, most significant bit first.

        Args:
            value: Unsigned message value
            nbits: Number of data bits (> 0)
        """
        if nbits <= 0:
            raise ValueError(f"nbits must be positive, got {nbits}")
        if not 0 <= value < (1 << nbits):
            raise ValueError(f"value {value:#x} does not fit in {nbits} unsigned bits")

        _logger.debug(f"Sending {self.protocol} value=0x{value:X} nbits={nbits}")
        self.transmitter.enable_ir_out(self.timing.carrier_khz)
        self._send_bits(value, nbits)
        self.transmitter.space(0)  # Always end with the LED off

    def _send_bits(self, value: int, nbits: int):
        raise NotImplementedError
