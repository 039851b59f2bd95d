#!/usr/bin/env python3
"""
ircodec Decoder CLI - Decode RC5/RC6 messages from recorded timings.
"""

import logging
import sys
from pathlib import Path

import click
import numpy as np
import soundfile as sf

from ircodec import RC5Decoder, RC6Decoder, load_timings, load_levels_file, parse_timings


# Headerless audio needs a sample rate; such suffixes are read as text timings
HEADERLESS_FORMATS = {"RAW"}


def read_input(path: str, threshold: float) -> np.ndarray:
    """Load a raw buffer from an audio envelope or a text file of timings."""
    fmt = Path(path).suffix.lstrip(".").upper()
    if fmt in sf.available_formats() and fmt not in HEADERLESS_FORMATS:
        return load_levels_file(path, threshold)
    return load_timings(path)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("timings", nargs=-1)
@click.option(
    "-i", "--input",
    type=click.Path(exists=True, dir_okay=False),
    help="Read timings or an envelope recording from a file",
)
@click.option(
    "-t", "--threshold",
    type=float,
    default=0.5,
    help="Mark level for envelope recordings (default: 0.5)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show why each protocol was rejected",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
def main(timings: tuple, input, threshold: float, verbose: bool, debug: bool):
    """
    Decode an RC5 or RC6 message.

    Timings alternate mark/space in µs, starting with a mark or with the
    gap as a negative value.

    Examples:

        ircodec-decode -- +889 -889 +1778 -889

        ircodec-decode -i capture.txt

        ircodec-decode -i capture.wav
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if not timings and not input:
        click.echo("No timings given. Pass them as arguments or use --input.", err=True)
        sys.exit(1)

    try:
        raw = read_input(input, threshold) if input else parse_timings(" ".join(timings))
    except (ValueError, TypeError, RuntimeError) as e:
        click.echo(f"Error reading timings: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(raw)} durations")

    decoders = (RC5Decoder(), RC6Decoder())
    for decoder in decoders:
        result = decoder.decode(raw)
        if result is not None:
            click.echo(str(result))
            return

    click.echo("No RC5/RC6 message decoded.", err=True)
    if verbose:
        for decoder in decoders:
            click.echo(f"  {decoder.protocol}: {decoder.error}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    main()
