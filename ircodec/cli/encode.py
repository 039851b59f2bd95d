#!/usr/bin/env python3
"""
ircodec Encoder CLI - Generate RC5/RC6 pulse trains.
"""

import logging
import sys

import click
import soundfile as sf

from ircodec import RC5Encoder, RC6Encoder, PulseRecorder
from ircodec.transmit import DEFAULT_GAP

ENCODERS = {
    "rc5": RC5Encoder,
    "rc6": RC6Encoder,
}

# Usual message lengths: RC5 start+toggle+address+command, RC6 mode 0 trailer+address+command
DEFAULT_NBITS = {
    "rc5": 12,
    "rc6": 20,
}


def parse_value(value: str) -> int:
    """Parse a decimal, 0x hex or 0b binary message value."""
    return int(value, 0)


@click.command()
@click.argument("protocol", type=click.Choice(sorted(ENCODERS), case_sensitive=False))
@click.argument("value", type=str)
@click.option(
    "-n", "--nbits",
    type=int,
    default=None,
    help="Number of data bits (default: 12 for RC5, 20 for RC6)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the envelope to an audio file instead of printing timings",
)
@click.option(
    "-s", "--sample-rate",
    type=int,
    default=200000,
    help="Envelope sample rate in Hz (default: 200000)",
)
@click.option(
    "-g", "--gap",
    type=int,
    default=DEFAULT_GAP,
    help=f"Idle time before the message in µs (default: {DEFAULT_GAP})",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
def main(protocol: str, value: str, nbits, output, sample_rate: int, gap: int, verbose: bool, debug: bool):
    """
    Encode VALUE as an RC5 or RC6 message.

    Examples:

        ircodec-encode rc5 0x1F -n 12

        ircodec-encode rc6 0xA5 -n 8 -o rc6.wav
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    protocol = protocol.lower()
    if nbits is None:
        nbits = DEFAULT_NBITS[protocol]

    try:
        data = parse_value(value)
    except ValueError:
        click.echo(f"Error parsing value: {value!r}", err=True)
        sys.exit(1)

    try:
        recorder = PulseRecorder(gap=gap)
        ENCODERS[protocol](recorder).send(data, nbits)
    except ValueError as e:
        click.echo(f"Error encoding: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Encoding {protocol.upper()} value=0x{data:X} nbits={nbits}")
        click.echo(f"  Carrier: {recorder.carrier_khz} kHz")
        click.echo(f"  Durations: {len(recorder.raw) - 1}")

    if output is None:
        click.echo(" ".join(f"{t:+d}" for t in recorder.timings()))
        return

    try:
        sf.write(str(output), recorder.to_levels(sample_rate), sample_rate, subtype='PCM_16')
        click.echo(f"✓ Generated {output}")
    except Exception as e:
        click.echo(f"Error writing file: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
