"""
Live capture: turn note-on messages from MIDI input ports into text.

MidiLogger opens every available input port, formats each note-on (channel
1, velocity > 0) with the configured output mode and hands the string to a
writer. Failing to open a port is reported through notify() and leaves the
logger disabled; it never raises out of start().
"""
import sys

import mido
import mido.ports

from .formatters import format_note
from .keys import resolve_key
from .settings import LoggerSettings

_NOTE_ON = 0x9


def note_from_message(message):
    """
    Return the MIDI note number for a note-on on channel 0, else None.

    *message* is a mido.Message or any (status, data1, data2) sequence.
    Note-on with velocity 0 counts as note-off and is ignored.
    """
    data = message.bytes() if hasattr(message, "bytes") else list(message)
    if len(data) < 3:
        return None
    status, note, velocity = data[0], data[1], data[2]
    command = status >> 4
    channel = status & 0xF
    if command == _NOTE_ON and channel == 0 and velocity > 0:
        return note
    return None


def open_all_inputs():
    """
    Open every MIDI input port mido can see. Raises OSError if there are none.

    If any port fails to open, the ports opened before it are closed and the
    error is re-raised.
    """
    names = mido.get_input_names()
    if not names:
        raise OSError("no MIDI input ports available")
    ports = []
    try:
        for name in names:
            ports.append(mido.open_input(name))
    except Exception:
        for port in ports:
            port.close()
        raise
    return ports


def _write_stdout(text):
    sys.stdout.write(text)
    sys.stdout.flush()


def _notify_stderr(message):
    print(f"[midilogger] {message}", file=sys.stderr)


class MidiLogger:
    """
    Usage:
        logger = MidiLogger(load_settings())
        if logger.start("Bb"):
            try:
                logger.listen()
            finally:
                logger.stop()
    """

    def __init__(self, settings=None, write=_write_stdout, notify=_notify_stderr,
                 open_input=open_all_inputs):
        self.settings = settings if settings is not None else LoggerSettings()
        self.write = write
        self.notify = notify
        self.open_input = open_input
        self.enabled = False
        self.current_key = "C"
        self._ports = []

    # ── Public API ──────────────────────────────────────────────────────────

    def start(self, key_name="C", strict_key=False) -> bool:
        """
        Open the input ports and begin logging in *key_name*.

        key_name=None means the key prompt was cancelled: nothing happens.
        Returns True when capture is active.
        """
        if key_name is None:
            return False
        if self.enabled:
            self.stop()
        self.current_key = resolve_key(key_name, strict=strict_key)
        self.notify(f"Capture key: {self.current_key}")
        try:
            self._ports = list(self.open_input())
        except (OSError, ImportError) as e:
            self._ports = []
            self.notify(f"Cannot open MIDI input port! ({e})")
            return False
        self.enabled = True
        self.notify("Key-aware MIDI Logger activated")
        return True

    def stop(self):
        for port in self._ports:
            port.close()
        self._ports = []
        self.enabled = False
        self.notify("Key-aware MIDI Logger is inactive")

    def toggle(self, key_name="C") -> bool:
        if self.enabled:
            self.stop()
            return False
        return self.start(key_name)

    def handle_message(self, message):
        """Format and write one incoming message; returns the text written or None."""
        if not self.enabled:
            return None
        note = note_from_message(message)
        if note is None:
            return None
        text = format_note(
            note,
            self.settings.export_type,
            separator=self.settings.separator,
            key_name=self.current_key,
        )
        self.write(text)
        return text

    def listen(self):
        """Block, logging messages from all open ports until stop() is called."""
        if not self.enabled:
            return
        for message in mido.ports.multi_receive(self._ports):
            self.handle_message(message)
            if not self.enabled:
                break
