# -*- coding: utf-8 -*-
# core/settings.py
from PyQt5.QtCore import QSettings

from core.config import SETTINGS_ORGANIZATION, SETTINGS_APPLICATION, ONBOARDING_KEY

_settings = None


def _get_settings():
    global _settings
    if _settings is None:
        _settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
    return _settings


def use_settings(settings):
    """Point the helpers below at another QSettings (an INI file in tests)."""
    global _settings
    _settings = settings


def load_setting(key, default=None):
    settings = _get_settings()
    if not settings.contains(key):
        return default
    value = settings.value(key)
    # INI files round-trip booleans as strings
    if isinstance(default, bool) and isinstance(value, str):
        return value.lower() == 'true'
    return value


def save_setting(key, value):
    settings = _get_settings()
    settings.setValue(key, value)
    settings.sync()


def has_seen_onboarding():
    return bool(load_setting(ONBOARDING_KEY, False))


def mark_onboarding_seen():
    save_setting(ONBOARDING_KEY, True)


def reset_onboarding():
    save_setting(ONBOARDING_KEY, False)
