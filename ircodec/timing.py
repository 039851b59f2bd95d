"""
Tolerance matching of measured pulse widths against nominal durations.

Receivers record durations at a fixed tick resolution, so each percentage
window is widened outward to whole ticks. Marks are measured long and spaces
short because of the receiver's response time; MARK_EXCESS compensates.
"""

from . import TOLERANCE, USECPERTICK, MARK_EXCESS


class TimingMatcher:
    """
    Tolerance window for comparing a measured width with a nominal one.

    All durations are in microseconds.
    """

    def __init__(
        self,
        tolerance: int = TOLERANCE,
        usec_per_tick: int = USECPERTICK,
        mark_excess: int = MARK_EXCESS,
    ):
        """
        Initialize matcher.

        Args:
            tolerance: Allowed deviation in percent of the nominal duration
            usec_per_tick: Capture resolution (µs)
            mark_excess: Amount marks run long and spaces run short (µs)
        """
        if not 0 <= tolerance < 100:
            raise ValueError(f"tolerance must be 0-99 percent, got {tolerance}")
        if usec_per_tick <= 0:
            raise ValueError(f"usec_per_tick must be positive, got {usec_per_tick}")

        self.tolerance = tolerance
        self.usec_per_tick = usec_per_tick
        self.mark_excess = mark_excess

    def ticks_low(self, us: int) -> int:
        """Lower bound of the window for `us`, in whole ticks."""
        return int(us * (1.0 - self.tolerance / 100.0) / self.usec_per_tick)

    def ticks_high(self, us: int) -> int:
        """Upper bound of the window for `us`, in whole ticks."""
        return int(us * (1.0 + self.tolerance / 100.0) / self.usec_per_tick + 1)

    def window(self, desired: int) -> tuple[int, int]:
        """Inclusive (low, high) bounds in µs accepted for `desired`."""
        return (
            self.ticks_low(desired) * self.usec_per_tick,
            self.ticks_high(desired) * self.usec_per_tick,
        )

    def match(self, width: int, desired: int) -> bool:
        low, high = self.window(desired)
        return low <= width <= high

    def match_mark(self, width: int, desired: int) -> bool:
        """Match a mark, which the receiver measures `mark_excess` long."""
        return self.match(width, desired + self.mark_excess)

    def match_space(self, width: int, desired: int) -> bool:
        """Match a space, which the receiver measures `mark_excess` short."""
        return self.match(width, desired - self.mark_excess)

    def __repr__(self) -> str:
        return (
            f"TimingMatcher(tolerance={self.tolerance}%, "
            f"tick={self.usec_per_tick}us, mark_excess={self.mark_excess}us)"
        )


DEFAULT_MATCHER = TimingMatcher()


def match(width: int, desired: int) -> bool:
    """Check `width` against `desired` using the default window."""
    return DEFAULT_MATCHER.match(width, desired)


def match_mark(width: int, desired: int) -> bool:
    """Check a mark against `desired` plus MARK_EXCESS."""
    return DEFAULT_MATCHER.match_mark(width, desired)


def match_space(width: int, desired: int) -> bool:
    """Check a space against `desired` minus MARK_EXCESS."""
    return DEFAULT_MATCHER.match_space(width, desired)
