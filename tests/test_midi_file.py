import unittest
import os
import shutil
import tempfile
from unittest.mock import patch, MagicMock
import mido
import music21
from midilogger.midi_file import iter_midi_file_notes, notes_from_score

def create_score(pitches):
    """One-part score: each item is a note name or a list of names (a chord)."""
    score = music21.stream.Score()
    part = music21.stream.Part()
    for item in pitches:
        if isinstance(item, list):
            part.append(music21.chord.Chord(item))
        else:
            part.append(music21.note.Note(item))
    score.append(part)
    return score

class TestNotesFromScore(unittest.TestCase):
    def test_melody_in_order(self):
        score = create_score(["C4", "D4", "E-4"])
        self.assertEqual(notes_from_score(score), [60, 62, 63])

    def test_chords_low_to_high(self):
        score = create_score(["C4", ["A4", "F4"]])
        self.assertEqual(notes_from_score(score), [60, 65, 69])

    def test_rests_are_skipped(self):
        score = create_score(["C4"])
        score.parts[0].append(music21.note.Rest())
        score.parts[0].append(music21.note.Note("G4"))
        self.assertEqual(notes_from_score(score), [60, 67])

    def test_parts_merge_by_onset(self):
        score = music21.stream.Score()
        upper = music21.stream.Part()
        upper.append([music21.note.Note("E5"), music21.note.Note("F5")])
        lower = music21.stream.Part()
        lower.append([music21.note.Note("C3", quarterLength=2.0)])
        score.insert(0, upper)
        score.insert(0, lower)
        self.assertEqual(notes_from_score(score), [48, 76, 77])

    def test_unpitched_percussion_is_skipped(self):
        score = create_score(["C4"])
        score.parts[0].append(music21.note.Unpitched())
        score.parts[0].append(music21.note.Note("D4"))
        self.assertEqual(notes_from_score(score), [60, 62])


class TestIterMidiFileNotes(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.midi_file = os.path.join(self.test_dir, "take.mid")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    @patch("music21.converter.parse")
    def test_parse_mocked(self, mock_parse):
        mock_parse.return_value = create_score(["G4", "A4"])
        self.assertEqual(list(iter_midi_file_notes(self.midi_file)), [67, 69])
        mock_parse.assert_called_with(self.midi_file)

    def test_midi_file_integration(self):
        create_score(["C4", "C#4", "D4", ["F4", "A4"]]).write("midi", fp=self.midi_file)
        self.assertEqual(list(iter_midi_file_notes(self.midi_file)), [60, 61, 62, 65, 69])

    def test_drum_track_is_skipped(self):
        # Channel 10 (index 9) notes are read back as unpitched percussion
        mid = mido.MidiFile()
        track = mido.MidiTrack()
        mid.tracks.append(track)
        track.append(mido.Message("note_on", channel=9, note=36, velocity=100, time=0))
        track.append(mido.Message("note_on", channel=0, note=60, velocity=100, time=0))
        track.append(mido.Message("note_off", channel=9, note=36, velocity=0, time=480))
        track.append(mido.Message("note_off", channel=0, note=60, velocity=0, time=0))
        mid.save(self.midi_file)
        self.assertEqual(list(iter_midi_file_notes(self.midi_file)), [60])

if __name__ == "__main__":
    unittest.main()
