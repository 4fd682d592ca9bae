"""Onboarding flag and setting helpers"""

import pytest
from PyQt5.QtCore import QSettings

from core import settings
from core.container import AppContainer
from infrastructure.key_value_store import InMemoryKeyValueStore


@pytest.fixture
def ini_settings(tmp_path):
    qs = QSettings(str(tmp_path / 'settings.ini'), QSettings.IniFormat)
    settings.use_settings(qs)
    yield qs
    settings.use_settings(None)


def test_onboarding_flag(ini_settings):
    assert settings.has_seen_onboarding() is False
    settings.mark_onboarding_seen()
    assert settings.has_seen_onboarding() is True
    settings.reset_onboarding()
    assert settings.has_seen_onboarding() is False


def test_flag_survives_reopen(ini_settings, tmp_path):
    settings.mark_onboarding_seen()
    settings.use_settings(QSettings(str(tmp_path / 'settings.ini'), QSettings.IniFormat))
    assert settings.has_seen_onboarding() is True


def test_load_setting_default(ini_settings):
    assert settings.load_setting('missing', 'fallback') == 'fallback'
    settings.save_setting('name', 'value')
    assert settings.load_setting('name') == 'value'


def test_container_wiring():
    container = AppContainer(InMemoryKeyValueStore())
    manager = container.start()
    assert container.query_service.summary() == {'tips': 100, 'categories': 5, 'favorites': 0}
    assert container.tip_service and container.category_service
    assert manager is container.manager
