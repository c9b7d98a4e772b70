"""
Persistent logger settings (output format and separator).

Stored as a small JSON object, by default in midilogger_settings.json in the
working directory. A missing or unreadable file yields the defaults.
"""
import json
import os
from dataclasses import asdict, dataclass

from .formatters import DEFAULT_SEPARATOR, ExportType

DEFAULT_SETTINGS_FILE = "midilogger_settings.json"


@dataclass
class LoggerSettings:
    export_type: ExportType = ExportType.SCIENTIFIC
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_dict(cls, data):
        """Build settings from a dict, ignoring unknown fields and bad values."""
        settings = cls()
        if not isinstance(data, dict):
            return settings
        try:
            settings.export_type = ExportType(data.get("export_type", settings.export_type))
        except ValueError:
            pass
        separator = data.get("separator")
        if isinstance(separator, str):
            settings.separator = separator
        return settings

    def to_dict(self):
        data = asdict(self)
        data["export_type"] = self.export_type.value
        return data


def _load_json(path):
    if os.path.isfile(path):
        try:
            with open(path) as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError):
            pass
    return {}


def load_settings(path=DEFAULT_SETTINGS_FILE) -> LoggerSettings:
    return LoggerSettings.from_dict(_load_json(path))


def save_settings(settings: LoggerSettings, path=DEFAULT_SETTINGS_FILE):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings.to_dict(), f, indent=2)
