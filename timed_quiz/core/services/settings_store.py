"""QSettings-backed persistence store."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

from timed_quiz.constants.about import APP_NAME, APP_ORGANIZATION


class SettingsStore:
    """Per-user key/value store on top of QSettings.

    Values are kept as strings; callers handle their own serialization.
    """

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(APP_ORGANIZATION, APP_NAME)

    @classmethod
    def from_ini_file(cls, file_path: Path) -> SettingsStore:
        return cls(QSettings(str(file_path), QSettings.Format.IniFormat))

    def get(self, key: str) -> str | None:
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key, type=str)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)

    def remove(self, key: str) -> None:
        self._settings.remove(key)

    def clear(self) -> None:
        self._settings.clear()

    def sync(self) -> None:
        self._settings.sync()
