"""
Per-protocol timing configuration.
"""

from dataclasses import dataclass
from enum import Enum

from . import (
    CARRIER_KHZ,
    MIN_RC5_SAMPLES,
    RC5_T1,
    MIN_RC6_SAMPLES,
    RC6_HDR_MARK,
    RC6_HDR_SPACE,
    RC6_T1,
)


class Protocol(Enum):
    """Protocol a decoded message was recognised as."""

    RC5 = "RC5"
    RC6 = "RC6"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProtocolTiming:
    """
    Nominal timings of one protocol variant (all durations in µs).

    header_mark and header_space are 0 for protocols without a leader.
    """

    protocol: Protocol
    t1: int
    min_samples: int
    carrier_khz: int = CARRIER_KHZ
    header_mark: int = 0
    header_space: int = 0


RC5_TIMING = ProtocolTiming(
    protocol=Protocol.RC5,
    t1=RC5_T1,
    min_samples=MIN_RC5_SAMPLES,
)

RC6_TIMING = ProtocolTiming(
    protocol=Protocol.RC6,
    t1=RC6_T1,
    min_samples=MIN_RC6_SAMPLES,
    header_mark=RC6_HDR_MARK,
    header_space=RC6_HDR_SPACE,
)
