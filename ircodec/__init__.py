"""
ircodec - Philips RC5 / RC6 infrared pulse codec.
Decodes raw mark/space durations and generates pulse trains for transmission.
"""

__version__ = "0.1.0"

# Timing tolerances
TOLERANCE = 25  # percent
USECPERTICK = 50  # microseconds per capture tick
MARK_EXCESS = 100  # marks measured long, spaces short (µs)

# Carrier
CARRIER_KHZ = 36

# RC5
MIN_RC5_SAMPLES = 11
RC5_T1 = 889  # µs

# RC6 mode 0
MIN_RC6_SAMPLES = 6  # gap, header, start bit mark and space, first data unit
RC6_HDR_MARK = 2666  # µs
RC6_HDR_SPACE = 889  # µs
RC6_T1 = 444  # µs
RC6_TOGGLE_INDEX = 3  # data bit sent at double width

from .protocols import Protocol, ProtocolTiming, RC5_TIMING, RC6_TIMING
from .errors import (
    DecodeError,
    InsufficientSamples,
    TimingMismatch,
    BadStartPattern,
    BadHeader,
    InconsistentDoubleWidthBit,
    InvalidTransition,
)
from .timing import TimingMatcher, match, match_mark, match_space
from .levels import Level, DecodeCursor
from .codec import DecodeResult, Decoder, Encoder
from .rc5 import RC5Decoder, RC5Encoder
from .rc6 import RC6Decoder, RC6Encoder
from .transmit import Transmitter, PulseRecorder
from .capture import as_raw_buffer, durations_from_levels, parse_timings, load_timings, load_levels_file

__all__ = [
    "Protocol",
    "ProtocolTiming",
    "RC5_TIMING",
    "RC6_TIMING",
    "DecodeError",
    "InsufficientSamples",
    "TimingMismatch",
    "BadStartPattern",
    "BadHeader",
    "InconsistentDoubleWidthBit",
    "InvalidTransition",
    "TimingMatcher",
    "match",
    "match_mark",
    "match_space",
    "Level",
    "DecodeCursor",
    "DecodeResult",
    "Decoder",
    "Encoder",
    "RC5Decoder",
    "RC5Encoder",
    "RC6Decoder",
    "RC6Encoder",
    "Transmitter",
    "PulseRecorder",
    "as_raw_buffer",
    "durations_from_levels",
    "parse_timings",
    "load_timings",
    "load_levels_file",
]
