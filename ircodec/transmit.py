"""
Transmitter interface used by the encoders, and an in-memory recorder.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

# Module-level logger
_logger = logging.getLogger(__name__)

# Idle time recorded before a message (µs), longer than any RC5/RC6 space
DEFAULT_GAP = 5000


class Transmitter(ABC):
    """
    Output stage driven by an Encoder.

    Implementations own the carrier and the LED; durations are in µs.
    """

    @abstractmethod
    def enable_ir_out(self, khz: int):
        """Set up the carrier frequency. Called once per message."""

    @abstractmethod
    def mark(self, duration: int):
        """Drive the carrier for `duration` µs."""

    @abstractmethod
    def space(self, duration: int):
        """Idle for `duration` µs; 0 leaves the LED off indefinitely."""


class PulseRecorder(Transmitter):
    """
    Records a pulse train the way an edge-capturing receiver would.

    Consecutive marks (or spaces) merge into one duration and the final
    idle space is not recorded, so `raw` can be fed straight to a decoder.
    """

    def __init__(self, gap: int = DEFAULT_GAP):
        """
        Initialize recorder.

        Args:
            gap: Leading space stored at index 0 of `raw` (µs)
        """
        if gap < 0:
            raise ValueError(f"gap must be non-negative, got {gap}")
        self.gap = gap
        self.carrier_khz: Optional[int] = None
        self.durations: list[int] = []
        self._marking = False

    def reset(self):
        """Discard everything recorded so far."""
        self.carrier_khz = None
        self.durations = []
        self._marking = False

    def enable_ir_out(self, khz: int):
        self.carrier_khz = khz

    def _append(self, duration: int, marking: bool):
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")
        if duration == 0:
            return
        if self.durations and self._marking == marking:
            self.durations[-1] += duration
        elif not self.durations and not marking:
            # Leading space is absorbed by the gap
            return
        else:
            self.durations.append(duration)
            self._marking = marking

    def mark(self, duration: int):
        self._append(duration, True)

    def space(self, duration: int):
        self._append(duration, False)

    @property
    def raw(self) -> np.ndarray:
        """Raw duration buffer: gap, then alternating mark/space, ending on a mark."""
        timings = list(self.durations)
        if timings and not self._marking:
            timings.pop()
        return np.array([self.gap] + timings, dtype=np.uint32)

    def timings(self) -> list[int]:
        """Recorded durations as signed values, marks positive and spaces negative."""
        return [d if i % 2 == 0 else -d for i, d in enumerate(self.raw[1:].tolist())]

    def to_levels(self, sample_rate: int) -> np.ndarray:
        """
        Render the recorded envelope as samples, including the leading gap.

        Args:
            sample_rate: Output sample rate (Hz)

        Returns:
            float32 array, 1.0 while marking and 0.0 while idle
        """
        raw = self.raw
        # Round cumulative edge times so rounding errors do not accumulate
        edges = np.rint(np.cumsum(raw, dtype=np.float64) * sample_rate / 1e6).astype(np.int64)
        # One unit of trailing idle so the last edge is recoverable
        total = int(edges[-1]) + max(1, int(edges[0]))
        levels = np.zeros(total, dtype=np.float32)

        start = 0
        for index, end in enumerate(edges):
            if index % 2:
                levels[start:end] = 1.0
            start = end

        _logger.debug(f"Rendered {len(raw) - 1} durations to {total} samples at {sample_rate} Hz")
        return levels

    def __repr__(self) -> str:
        return f"PulseRecorder(durations={len(self.durations)}, carrier={self.carrier_khz}kHz)"
