#!/usr/bin/env python3
"""
scripts/log_midi.py — Write MIDI notes as text (raw, scientific or ABC).

Notes come from the command line, from a MIDI file, or live from every
connected MIDI input port (--port). Output goes to stdout so it can be
piped or pasted into a document; diagnostics go to stderr.

Examples:
    python scripts/log_midi.py 60 61 62 --format abc --key D
    python scripts/log_midi.py --file take1.mid --format scientific --separator " "
    python scripts/log_midi.py --port --format abc --key Bb
"""

import argparse
import os
import sys

# Ensure the midilogger package is importable when run from a checkout
_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from midilogger.capture import MidiLogger
from midilogger.formatters import ExportType, abc_template, format_note
from midilogger.keys import SUPPORTED_KEYS, InvalidKeyError, resolve_key
from midilogger.midi_file import iter_midi_file_notes
from midilogger.settings import DEFAULT_SETTINGS_FILE, load_settings, save_settings


def build_parser():
    parser = argparse.ArgumentParser(description="Log MIDI notes as text.")
    parser.add_argument("notes", nargs="*", type=int, help="MIDI note numbers (0-127)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help="Read notes from a Standard MIDI File")
    source.add_argument("--port", action="store_true",
                        help="Capture live from all MIDI input ports (Ctrl-C to stop)")
    parser.add_argument("--format", choices=[t.value for t in ExportType], default=None,
                        help="Output format (default: from settings, else scientific)")
    parser.add_argument("--separator", default=None,
                        help="Separator after each note (raw and scientific only)")
    parser.add_argument("--key", default=None,
                        help=f"Key for ABC spelling: {' '.join(SUPPORTED_KEYS)} (default C)")
    parser.add_argument("--strict-key", action="store_true",
                        help="Reject unsupported keys instead of falling back to C")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_FILE,
                        help="Path to the JSON settings file")
    parser.add_argument("--save-settings", action="store_true",
                        help="Persist --format/--separator to the settings file")
    parser.add_argument("--template", action="store_true",
                        help="Print an ABC tune template before the notes")
    return parser


def format_notes(notes, settings, key_name):
    return "".join(
        format_note(n, settings.export_type, separator=settings.separator, key_name=key_name)
        for n in notes
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    for n in args.notes:
        if not 0 <= n <= 127:
            parser.error(f"note {n} is outside 0-127")

    settings = load_settings(args.settings)
    if args.format is not None:
        settings.export_type = ExportType(args.format)
    if args.separator is not None:
        settings.separator = args.separator
    if args.save_settings:
        save_settings(settings, args.settings)
        print(f"Saved settings to {args.settings}", file=sys.stderr)

    try:
        key_name = resolve_key(args.key if args.key is not None else "C", strict=args.strict_key)
    except InvalidKeyError as e:
        sys.exit(f"Error: {e}")

    if args.template:
        print(abc_template(key=key_name if args.key is not None else "none"))

    if args.port:
        logger = MidiLogger(settings)
        if not logger.start(key_name):
            sys.exit(1)
        try:
            logger.listen()
        except KeyboardInterrupt:
            pass
        finally:
            logger.stop()
        print()
        return

    if args.file:
        print(f"Parsing {args.file}...", file=sys.stderr)
        try:
            notes = list(iter_midi_file_notes(args.file))
        except Exception as e:
            sys.exit(f"Error parsing MIDI file: {e}")
        print(f"Read {len(notes)} notes.", file=sys.stderr)
    else:
        notes = args.notes

    if notes:
        print(format_notes(notes, settings, key_name))


if __name__ == "__main__":
    main()
