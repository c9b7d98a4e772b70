import collections

from .constants import _ACCIDENTAL_SHIFT, _LETTER_TO_PC

Spelling = collections.namedtuple("Spelling", ["letter", "accidental"])


def decompose(pitch_number: int) -> tuple[int, int]:
    """
    Split a MIDI pitch number into (pitch_class 0-11, octave).

    Octaves follow scientific pitch notation, so 60 → (0, 4) (middle C).
    Negative numbers still give a pitch class in 0-11.
    """
    pitch_class = ((pitch_number % 12) + 12) % 12
    octave = pitch_number // 12 - 1
    return pitch_class, octave


def spelling_pitch_class(spelling: Spelling) -> int:
    """
    Pitch class (0-11) sounded by a spelling, e.g. Db → 1.

    Used to check that every candidate in the spelling table maps back to
    its own pitch class.
    """
    return (_LETTER_TO_PC[spelling.letter] + _ACCIDENTAL_SHIFT[spelling.accidental]) % 12
