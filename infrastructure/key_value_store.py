# infrastructure/key_value_store.py
from typing import Dict, Optional

from PyQt5.QtCore import QByteArray, QSettings

from core.config import SETTINGS_ORGANIZATION, SETTINGS_APPLICATION


class KeyValueStore:
    """Byte-oriented persistence primitive: get(key) -> bytes or None, set(key, bytes)."""

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError


class QSettingsKeyValueStore(KeyValueStore):
    def __init__(self, settings: Optional[QSettings] = None, path: Optional[str] = None):
        if settings is None:
            if path is not None:
                settings = QSettings(path, QSettings.IniFormat)
            else:
                settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        self._settings = settings

    @property
    def settings(self) -> QSettings:
        return self._settings

    def get(self, key: str) -> Optional[bytes]:
        if not self._settings.contains(key):
            return None
        raw = self._settings.value(key)
        if isinstance(raw, QByteArray):
            return bytes(raw)
        if isinstance(raw, bytes):
            return raw
        if isinstance(raw, str):
            return raw.encode('utf-8')
        return None

    def set(self, key: str, value: bytes) -> None:
        self._settings.setValue(key, QByteArray(value))
        self._settings.sync()


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def keys(self):
        return list(self._data.keys())
