"""
Major-key model: key-signature defaults and enharmonic tie-break policy.

A key name resolves to a total Letter → accidental mapping. Sharp keys mark
the first N letters of F C G D A E B, flat keys the first N of B E A D G C F.
Unrecognised names behave like C unless strict resolution is requested.
"""
from .constants import (
    DEFAULT_KEY,
    FLAT,
    FLATS_ORDER,
    LETTERS,
    NATURAL,
    SHARP,
    SHARPS_ORDER,
    _FLAT_LEANING_KEYS,
    _KEY_TO_FLATS,
    _KEY_TO_SHARPS,
)

# Order offered by the key picker: sharp side of the circle, then flat side.
SUPPORTED_KEYS: tuple[str, ...] = (
    "C", "G", "D", "A", "E", "B", "F#", "C#",
    "F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb",
)


class InvalidKeyError(ValueError):
    """Raised by strict key resolution for a name outside SUPPORTED_KEYS."""


def normalize_key(key_name) -> str:
    if key_name is None:
        return ""
    return str(key_name).strip()


def is_supported_key(key_name) -> bool:
    return normalize_key(key_name) in SUPPORTED_KEYS


def resolve_key(key_name, strict=False) -> str:
    """
    Return the canonical key name for *key_name*.

    Unknown or empty names fall back to C. With strict=True they raise
    InvalidKeyError instead.
    """
    k = normalize_key(key_name)
    if k in SUPPORTED_KEYS:
        return k
    if strict:
        raise InvalidKeyError(
            f"Unsupported key {key_name!r}; expected one of {', '.join(SUPPORTED_KEYS)}"
        )
    # Unknown names become "C", so callers also get C's flat tie-break
    # (format_key_aware_pitch with the raw name leans sharp instead).
    return DEFAULT_KEY


def key_signature_count(key_name) -> int:
    """Signed signature size: +N sharps, -N flats, 0 for C or unknown keys."""
    k = normalize_key(key_name)
    if k in _KEY_TO_SHARPS:
        return _KEY_TO_SHARPS[k]
    if k in _KEY_TO_FLATS:
        return -_KEY_TO_FLATS[k]
    return 0


def key_signature_defaults(key_name) -> dict[str, str]:
    """
    Map every letter A-G to the accidental the key signature implies.

    >>> key_signature_defaults("D")["F"], key_signature_defaults("D")["C"]
    ('sharp', 'sharp')
    """
    defaults = {letter: NATURAL for letter in LETTERS}
    count = key_signature_count(key_name)
    if count > 0:
        for letter in SHARPS_ORDER[:count]:
            defaults[letter] = SHARP
    elif count < 0:
        for letter in FLATS_ORDER[:-count]:
            defaults[letter] = FLAT
    return defaults


def prefers_flats_on_tie(key_name) -> bool:
    """True for C and the flat-family keys; black keys then spell as flats."""
    return normalize_key(key_name) in _FLAT_LEANING_KEYS
