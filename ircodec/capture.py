"""
Loading raw duration buffers from timings, text files and envelope recordings.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Union

import numpy as np
import soundfile as sf

from .transmit import DEFAULT_GAP

# Module-level logger
_logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def as_raw_buffer(durations: Iterable[int]) -> np.ndarray:
    """
    Normalise durations to a raw duration buffer.

    Args:
        durations: Durations in µs; index 0 is the gap before the message

    Returns:
        1-D uint32 array

    Raises:
        ValueError: Input is not a flat sequence of non-negative integers
    """
    if isinstance(durations, np.ndarray) and durations.dtype == np.uint32 and durations.ndim == 1:
        return durations

    arr = durations if isinstance(durations, np.ndarray) else np.asarray(list(durations))
    if arr.size == 0:
        return np.zeros(0, dtype=np.uint32)
    if arr.ndim != 1:
        raise ValueError(f"Raw buffer must be one-dimensional, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
        raise ValueError(f"Raw buffer must hold integers, got {arr.dtype}")
    if np.any(arr != np.floor(arr)):
        raise ValueError("Raw buffer durations must be whole microseconds")
    if np.any(arr < 0):
        raise ValueError("Raw buffer durations must be non-negative")
    if np.any(arr > np.iinfo(np.uint32).max):
        raise ValueError("Raw buffer duration out of range")

    return arr.astype(np.uint32)


def parse_timings(text: str, gap: int = DEFAULT_GAP) -> np.ndarray:
    """
    Parse timings such as "+889 -889 +1778" into a raw duration buffer.

    Signs are only informational; durations alternate mark/space. A leading
    negative value is taken as the gap, otherwise `gap` is prepended.
    Text after '#' on a line is ignored.

    Args:
        text: Timings separated by whitespace or commas
        gap: Gap to insert when the first value is a mark (µs)

    Returns:
        Raw duration buffer
    """
    lines = [line.split("#", 1)[0] for line in text.splitlines()]
    tokens = [t for t in _TOKEN_SPLIT.split(" ".join(lines)) if t]
    if not tokens:
        raise ValueError("No timings found")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid timing value: {token!r}") from None

    durations = [abs(v) for v in values]
    if not tokens[0].startswith("-"):
        durations.insert(0, gap)

    return as_raw_buffer(durations)


def load_timings(path: Union[str, Path], gap: int = DEFAULT_GAP) -> np.ndarray:
    """Read a text file of timings; see parse_timings()."""
    return parse_timings(Path(path).read_text(encoding="utf-8"), gap)


def durations_from_levels(
    levels: np.ndarray,
    sample_rate: int,
    threshold: float = 0.5,
) -> np.ndarray:
    """
    Convert a sampled receiver envelope into a raw duration buffer.

    Samples above `threshold` are marks. The idle time before the first mark
    becomes the gap and the idle time after the last mark is dropped.

    Args:
        levels: Envelope samples (1-D, or 2-D with channels in columns)
        sample_rate: Sample rate (Hz)
        threshold: Mark/space decision level

    Returns:
        Raw duration buffer (µs)
    """
    levels = np.asarray(levels)
    # Use first channel if stereo
    if levels.ndim > 1:
        levels = levels[:, 0]

    marks = levels > threshold
    if not np.any(marks):
        return np.array([round(len(levels) * 1e6 / sample_rate)], dtype=np.uint32)

    # Drop trailing idle
    last_mark = int(np.flatnonzero(marks)[-1])
    marks = marks[:last_mark + 1]

    # Edge positions in samples, converted to µs before differencing
    changes = np.flatnonzero(np.diff(marks.astype(np.int8))) + 1
    edges = np.concatenate(([0], changes, [len(marks)]))
    edges_us = np.rint(edges * 1e6 / sample_rate).astype(np.int64)
    durations = np.diff(edges_us)

    if marks[0]:
        # No idle recorded before the first mark
        durations = np.concatenate(([0], durations))

    _logger.debug(f"Extracted {len(durations)} durations from {len(levels)} samples")
    return durations.astype(np.uint32)


def load_levels_file(path: Union[str, Path], threshold: float = 0.5) -> np.ndarray:
    """
    Read an envelope recording (e.g. a WAV file) and convert it to durations.

    Args:
        path: Audio file readable by soundfile
        threshold: Mark/space decision level

    Returns:
        Raw duration buffer (µs)
    """
    samples, sr = sf.read(str(path))
    _logger.info(f"Loaded {len(samples)} samples at {sr} Hz from {path}")
    return durations_from_levels(samples, sr, threshold)
