import music21
import music21.pitch

from .constants import NATURAL


def notes_from_score(score) -> list[int]:
    """
    MIDI note numbers of every pitched note in a music21 stream, in onset order.

    Chords contribute each member pitch, low to high. Notes sounding at the
    same offset in different parts are also ordered low to high. Unpitched
    percussion (MIDI channel 10) has no pitches and is skipped.
    """
    events = []
    for n in score.flatten().notes:
        offset = float(n.offset)
        for p in n.pitches:
            events.append((offset, p.midi))
    events.sort()
    return [midi for _, midi in events]


def iter_midi_file_notes(midi_file_path):
    """Yield note numbers from a Standard MIDI File (see notes_from_score)."""
    score = music21.converter.parse(midi_file_path)
    yield from notes_from_score(score)


def to_music21_pitch(spelling, octave: int) -> music21.pitch.Pitch:
    """Build a music21 Pitch for a selected spelling (e.g. Db, 4 → D-4)."""
    p = music21.pitch.Pitch()
    p.step = spelling.letter
    p.octave = octave
    if spelling.accidental != NATURAL:
        p.accidental = music21.pitch.Accidental(spelling.accidental)
    return p
