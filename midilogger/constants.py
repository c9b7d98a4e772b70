# ── Pitch spelling tables ─────────────────────────────────────────────────────

LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")

NATURAL = "natural"
SHARP = "sharp"
FLAT = "flat"

# Pitch class → candidate (letter, accidental) spellings, in priority order.
# Double sharps / double flats are not represented.
_CANDIDATES: dict[int, tuple[tuple[str, str], ...]] = {
    0:  (("C", NATURAL),),
    1:  (("C", SHARP), ("D", FLAT)),
    2:  (("D", NATURAL),),
    3:  (("D", SHARP), ("E", FLAT)),
    4:  (("E", NATURAL),),
    5:  (("F", NATURAL),),
    6:  (("F", SHARP), ("G", FLAT)),
    7:  (("G", NATURAL),),
    8:  (("G", SHARP), ("A", FLAT)),
    9:  (("A", NATURAL),),
    10: (("A", SHARP), ("B", FLAT)),
    11: (("B", NATURAL),),
}
# Natural letter → pitch class, used to check candidates map back correctly.
_LETTER_TO_PC: dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}
_ACCIDENTAL_SHIFT: dict[str, int] = {NATURAL: 0, SHARP: 1, FLAT: -1}

# ── Key signatures ────────────────────────────────────────────────────────────

SHARPS_ORDER: tuple[str, ...] = ("F", "C", "G", "D", "A", "E", "B")
FLATS_ORDER: tuple[str, ...] = ("B", "E", "A", "D", "G", "C", "F")

_KEY_TO_SHARPS: dict[str, int] = {
    "C": 0, "G": 1, "D": 2, "A": 3, "E": 4, "B": 5, "F#": 6, "C#": 7,
}
_KEY_TO_FLATS: dict[str, int] = {
    "C": 0, "F": 1, "Bb": 2, "Eb": 3, "Ab": 4, "Db": 5, "Gb": 6, "Cb": 7,
}
# Flat-family keys; C joins them when breaking enharmonic ties.
_FLAT_LEANING_KEYS: frozenset[str] = frozenset(
    {"C", "F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"}
)
DEFAULT_KEY = "C"

# ── Output glyphs ─────────────────────────────────────────────────────────────

# ABC accidental prefixes, emitted only when they differ from the signature.
_ABC_ACCIDENTAL_GLYPHS: dict[str, str] = {SHARP: "^", FLAT: "_", NATURAL: "="}
# ABC octave whose upper-case letters carry no marks (C = middle C).
_ABC_REFERENCE_OCTAVE = 4

# Sharp-biased names for the scientific formatter.
_SCIENTIFIC_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
)
