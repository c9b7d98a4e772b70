import unittest
import music21
import music21.key
from midilogger.constants import FLATS_ORDER, SHARPS_ORDER
from midilogger.keys import (
    SUPPORTED_KEYS,
    InvalidKeyError,
    is_supported_key,
    key_signature_count,
    key_signature_defaults,
    normalize_key,
    prefers_flats_on_tie,
    resolve_key,
)

def _music21_key(name):
    # music21 writes flats as '-'
    return music21.key.Key(name[0] + name[1:].replace("b", "-"))

class TestKeySignatureDefaults(unittest.TestCase):
    def test_c_is_all_natural(self):
        defaults = key_signature_defaults("C")
        self.assertEqual(sorted(defaults), list("ABCDEFG"))
        self.assertTrue(all(acc == "natural" for acc in defaults.values()))

    def test_d_major(self):
        defaults = key_signature_defaults("D")
        self.assertEqual(defaults["F"], "sharp")
        self.assertEqual(defaults["C"], "sharp")
        for letter in "ABDEG":
            self.assertEqual(defaults[letter], "natural")

    def test_e_flat_major(self):
        defaults = key_signature_defaults("Eb")
        self.assertEqual({l for l, a in defaults.items() if a == "flat"}, {"B", "E", "A"})
        self.assertNotIn("sharp", defaults.values())

    def test_extreme_keys(self):
        self.assertTrue(all(a == "sharp" for a in key_signature_defaults("C#").values()))
        self.assertTrue(all(a == "flat" for a in key_signature_defaults("Cb").values()))

    def test_unknown_and_empty_fall_back_to_natural(self):
        for name in ["", "H", "c#", "D minor", None]:
            defaults = key_signature_defaults(name)
            self.assertEqual(len(defaults), 7)
            self.assertTrue(all(a == "natural" for a in defaults.values()), name)

    def test_whitespace_is_trimmed(self):
        self.assertEqual(key_signature_defaults("  Bb \n"), key_signature_defaults("Bb"))
        self.assertEqual(normalize_key(" F# "), "F#")

    def test_never_both_sharps_and_flats(self):
        for name in SUPPORTED_KEYS:
            values = set(key_signature_defaults(name).values())
            self.assertFalse({"sharp", "flat"} <= values, name)

    def test_order_application(self):
        for name in SUPPORTED_KEYS:
            count = key_signature_count(name)
            defaults = key_signature_defaults(name)
            if count > 0:
                altered = [l for l in SHARPS_ORDER if defaults[l] == "sharp"]
                self.assertEqual(altered, list(SHARPS_ORDER[:count]))
            elif count < 0:
                altered = [l for l in FLATS_ORDER if defaults[l] == "flat"]
                self.assertEqual(altered, list(FLATS_ORDER[:-count]))

    def test_counts_agree_with_music21(self):
        for name in SUPPORTED_KEYS:
            self.assertEqual(key_signature_count(name), _music21_key(name).sharps, name)

    def test_altered_letters_agree_with_music21(self):
        for name in SUPPORTED_KEYS:
            m21 = _music21_key(name)
            expected = {p.step for p in m21.alteredPitches}
            defaults = key_signature_defaults(name)
            actual = {l for l, a in defaults.items() if a != "natural"}
            self.assertEqual(actual, expected, name)


class TestTieBreakPolicy(unittest.TestCase):
    def test_c_prefers_flats(self):
        self.assertTrue(prefers_flats_on_tie("C"))

    def test_flat_family(self):
        for name in ["F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"]:
            self.assertTrue(prefers_flats_on_tie(name), name)

    def test_sharp_family(self):
        for name in ["G", "D", "A", "E", "B", "F#", "C#"]:
            self.assertFalse(prefers_flats_on_tie(name), name)

    def test_unknown_keys_lean_sharp(self):
        self.assertFalse(prefers_flats_on_tie(""))
        self.assertFalse(prefers_flats_on_tie("H"))
        self.assertTrue(prefers_flats_on_tie(" C "))


class TestResolveKey(unittest.TestCase):
    def test_supported_keys(self):
        self.assertEqual(len(SUPPORTED_KEYS), 15)
        for name in SUPPORTED_KEYS:
            self.assertTrue(is_supported_key(name))
            self.assertEqual(resolve_key(name), name)

    def test_fallback(self):
        self.assertEqual(resolve_key("H"), "C")
        self.assertEqual(resolve_key(""), "C")
        self.assertEqual(resolve_key(" Gb "), "Gb")

    def test_fallback_takes_c_tie_break(self):
        # The raw unknown name leans sharp; once resolved it leans flat like C
        self.assertFalse(prefers_flats_on_tie("H"))
        self.assertTrue(prefers_flats_on_tie(resolve_key("H")))

    def test_strict(self):
        with self.assertRaises(InvalidKeyError):
            resolve_key("H", strict=True)
        with self.assertRaises(ValueError):
            resolve_key("", strict=True)
        self.assertEqual(resolve_key("Ab", strict=True), "Ab")

if __name__ == "__main__":
    unittest.main()
