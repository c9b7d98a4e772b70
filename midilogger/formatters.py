"""
Note formatters: raw MIDI numbers, scientific pitch names and key-aware ABC.

The three output modes are a closed set selected by ExportType and invoked
through format_note().
"""
import enum

from .constants import (
    _ABC_ACCIDENTAL_GLYPHS,
    _ABC_REFERENCE_OCTAVE,
    _SCIENTIFIC_NAMES,
    DEFAULT_KEY,
)
from .keys import key_signature_defaults
from .pitch import Spelling, decompose
from .spelling import spell_pitch

DEFAULT_SEPARATOR = ","


class ExportType(str, enum.Enum):
    RAW = "raw"
    SCIENTIFIC = "scientific"
    ABC = "abc"


# ── ABC rendering ─────────────────────────────────────────────────────────────

def abc_accidental_prefix(accidental: str, default_accidental: str) -> str:
    # Nothing to write when the key signature already implies it
    if accidental == default_accidental:
        return ""
    return _ABC_ACCIDENTAL_GLYPHS[accidental]


def abc_octave_body(letter: str, octave: int) -> str:
    """
    Letter plus ABC octave marks.

    Octave 4 is upper-case with no marks ("C" = middle C), lower octaves add
    commas. Octave 5 is lower-case with no marks, higher octaves add
    apostrophes.
    """
    if octave <= _ABC_REFERENCE_OCTAVE:
        return letter.upper() + "," * (_ABC_REFERENCE_OCTAVE - octave)
    return letter.lower() + "'" * (octave - _ABC_REFERENCE_OCTAVE - 1)


def render_abc(spelling: Spelling, key_defaults: dict[str, str], octave: int) -> str:
    prefix = abc_accidental_prefix(spelling.accidental, key_defaults[spelling.letter])
    return prefix + abc_octave_body(spelling.letter, octave)


# ── Formatters ────────────────────────────────────────────────────────────────

def format_raw(pitch_number: int, separator: str = DEFAULT_SEPARATOR) -> str:
    return f"{pitch_number}{separator}"


def format_scientific(pitch_number: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """Sharp-biased scientific name, e.g. 61 → "C#4" + separator."""
    pitch_class, octave = decompose(pitch_number)
    return f"{_SCIENTIFIC_NAMES[pitch_class]}{octave}{separator}"


def format_key_aware_pitch(pitch_number: int, key_name: str = DEFAULT_KEY) -> str:
    """
    Spell a MIDI pitch as an ABC note in the given major key.

    Args:
        pitch_number (int): MIDI note number, 60 = middle C.
        key_name (str): One of the supported major keys ("C", "F#", "Bb", ...).
            Unknown names get a natural signature and sharp tie-breaks.

    Returns:
        str: ABC note such as "C", "_D", "^f'" or "=B,".
    """
    spelling, octave = spell_pitch(pitch_number, key_name)
    return render_abc(spelling, key_signature_defaults(key_name), octave)


def format_note(pitch_number, export_type, separator=DEFAULT_SEPARATOR, key_name=DEFAULT_KEY) -> str:
    """
    Format a note with the selected output mode.

    The ABC mode ignores the separator; notes are written back to back.
    """
    export_type = ExportType(export_type)
    if export_type is ExportType.RAW:
        return format_raw(pitch_number, separator)
    if export_type is ExportType.SCIENTIFIC:
        return format_scientific(pitch_number, separator)
    return format_key_aware_pitch(pitch_number, key_name)


# ── ABC tune template ─────────────────────────────────────────────────────────

def abc_template(title="Title", meter="4/4", tempo="1/4=90", key="none") -> str:
    """Fenced music-abc block with an empty body, ready for captured notes."""
    return "\n".join([
        "```music-abc",
        "X:1",
        f"T:{title}",
        f"M:{meter}",
        f"Q:{tempo}",
        f"K:{key}",
        "",
        "```",
    ])
