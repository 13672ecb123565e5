"""
Command-line entry point: compile an MML piece and write it as PCM or WAV.

    python -m funcsynth --song mario --instrument dummy > mario.raw
    python -m funcsynth --mml "t120 l8 cdefgab>c" --output scale.wav
    python -m funcsynth --song air --filter hall.raw --output air.wav

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from funcsynth import __version__
from funcsynth.config import DEFAULT_SAMPLE_RATE
from funcsynth.errors import SynthError
from funcsynth.filter_kernel import load_kernel
from funcsynth.instruments import INSTRUMENTS, get_instrument
from funcsynth.logger import set_global_logging
from funcsynth.mml import compile_mml, parse_mml, piece_duration
from funcsynth.pcm import write_pcm16, write_wav
from funcsynth.record import Record
from funcsynth.songs import SONGS, get_song

# Seconds of silence rendered after the last note, for envelope release
TAIL_SECONDS = 0.5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funcsynth",
        description="Render MML notation through a functional synthesizer.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--song",
        choices=sorted(SONGS),
        default="mario",
        help="Built-in piece to render (default: mario)",
    )
    source.add_argument(
        "--mml",
        help="MML text to render instead of a built-in piece",
    )
    parser.add_argument(
        "--instrument",
        choices=sorted(INSTRUMENTS),
        default="dummy",
        help="Instrument preset (default: dummy)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Seconds to render (default: length of the piece plus a short tail)",
    )
    parser.add_argument(
        "--sample-rate",
        type=int,
        default=DEFAULT_SAMPLE_RATE,
        help=f"Sample rate in Hz (default: {DEFAULT_SAMPLE_RATE})",
    )
    parser.add_argument(
        "--filter",
        type=Path,
        default=None,
        help="Raw 16-bit PCM impulse response to convolve the result with",
    )
    parser.add_argument(
        "--overlap-add",
        action="store_true",
        help="Use exact overlap-add convolution instead of independent blocks",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Render on this many threads",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file; .wav writes a WAV file, anything else raw PCM "
             "(default: raw PCM on stdout)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    logger = set_global_logging(level=args.log_level)
    logger.info(f"funcsynth v{__version__} starting...")

    text = args.mml if args.mml is not None else get_song(args.song)
    if args.sample_rate <= 0:
        print(f"Error: sample rate must be positive: {args.sample_rate}", file=sys.stderr)
        return 2

    try:
        duration = args.duration
        if duration is None:
            duration = piece_duration(parse_mml(text)) + TAIL_SECONDS
        piece = compile_mml(text, get_instrument(args.instrument))
        record = Record.record(piece, args.sample_rate, duration, workers=args.workers)
        if args.filter is not None:
            record.convolve(load_kernel(args.filter), overlap_add=args.overlap_add)
    except SynthError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        write_pcm16(sys.stdout.buffer, record.samples)
        sys.stdout.buffer.flush()
    elif args.output.suffix.lower() == ".wav":
        write_wav(args.output, record)
    else:
        with open(args.output, "wb") as f:
            write_pcm16(f, record.samples)

    logger.info(f"Rendered {len(record)} samples ({record.duration:.2f}s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
