"""
Shared fixtures.
"""

import pytest

from ircodec import PulseRecorder, RC5Encoder, RC6Encoder, Transmitter


class CallLog(Transmitter):
    """Transmitter that keeps every call in order."""

    def __init__(self):
        self.calls = []

    def enable_ir_out(self, khz):
        self.calls.append(("carrier", khz))

    def mark(self, duration):
        self.calls.append(("mark", duration))

    def space(self, duration):
        self.calls.append(("space", duration))


def _recorder(encoder_cls):
    def record(value, nbits, gap=5000):
        recorder = PulseRecorder(gap=gap)
        encoder_cls(recorder).send(value, nbits)
        return recorder.raw
    return record


@pytest.fixture
def call_log():
    return CallLog()


@pytest.fixture
def record_rc5():
    """Raw buffer of an RC5 message as a receiver would capture it."""
    return _recorder(RC5Encoder)


@pytest.fixture
def record_rc6():
    """Raw buffer of an RC6 message as a receiver would capture it."""
    return _recorder(RC6Encoder)
