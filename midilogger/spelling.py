"""
Enharmonic spelling selection.

Each pitch class has one or two candidate spellings. The selector keeps the
candidate that needs the fewest written accidentals against the key
signature; ties go to the key's preferred accidental.
"""
from .constants import FLAT, SHARP, _CANDIDATES
from .keys import key_signature_defaults, prefers_flats_on_tie
from .pitch import Spelling, decompose


def candidate_spellings(pitch_class: int) -> list[Spelling]:
    """Ordered candidate spellings for a pitch class (0-11)."""
    return [Spelling(letter, acc) for letter, acc in _CANDIDATES[pitch_class % 12]]


def accidental_cost(spelling: Spelling, key_defaults: dict[str, str]) -> int:
    """0 if the key signature already implies the accidental, else 1."""
    return 0 if spelling.accidental == key_defaults[spelling.letter] else 1


def select_spelling(pitch_class, key_defaults, prefer_flats) -> Spelling:
    candidates = candidate_spellings(pitch_class)
    preferred = FLAT if prefer_flats else SHARP

    best = candidates[0]
    best_cost = accidental_cost(best, key_defaults)
    for cand in candidates[1:]:
        cost = accidental_cost(cand, key_defaults)
        if cost < best_cost:
            best, best_cost = cand, cost
        elif cost == best_cost:
            if cand.accidental == preferred and best.accidental != preferred:
                best = cand
    return best


def spell_pitch(pitch_number: int, key_name: str = "C") -> tuple[Spelling, int]:
    """Return (spelling, octave) for a MIDI pitch under a major key."""
    pitch_class, octave = decompose(pitch_number)
    spelling = select_spelling(
        pitch_class,
        key_signature_defaults(key_name),
        prefers_flats_on_tie(key_name),
    )
    return spelling, octave

