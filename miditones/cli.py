"""Command line entry point: read a MIDI file and send its tones to a serial port."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from miditones.midi import MidiFormatError, format_tones, parse_midi, read_midi_file
from miditones.transmit import DEFAULT_BAUD, DEFAULT_LIMIT, send_tone_data

DEFAULT_PORT = "/dev/ttyACM0"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="miditones",
        usage="%(prog)s <Midi-File> [<limit>]",
        description="Convert a MIDI file to tones and send them over a serial port.",
    )
    parser.add_argument("midi_file", help="path of the MIDI file")
    parser.add_argument(
        "limit", nargs="?", type=int, default=DEFAULT_LIMIT, help="most tones to send"
    )
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial device")
    parser.add_argument("--baud", type=int, default=DEFAULT_BAUD, help="baud rate")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _parser().parse_args(argv)

    try:
        data = read_midi_file(args.midi_file)
    except OSError:
        print(f"Unable to open file {args.midi_file}", file=sys.stderr)
        return 1
    except MidiFormatError as exc:
        print(f"File format not recognised: {exc}", file=sys.stderr)
        return 1
    print(f"Opened file {args.midi_file} successfully")

    try:
        track = parse_midi(data)
    except MidiFormatError as exc:
        print(f"File format not recognised: {exc}", file=sys.stderr)
        return 1
    tone_data = format_tones(track)
    print("Done reading notes")

    try:
        send_tone_data(tone_data, args.port, args.baud, args.limit)
    except OSError:
        print(f"Error opening serial port {args.port}", file=sys.stderr)
        print("Failed to send data to serial port", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())