"""Unit tests for snapselect.settings module."""
import dataclasses
import importlib

import pytest

from snapselect import settings as settings_module
from snapselect.constants import OPTION_SELECTOR, TIMEOUT_ELEMENT_DEFAULT


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings under a patched environment, restoring it afterwards."""
    def _reload(**env):
        for k, v in env.items():
            monkeypatch.setenv(k, v)
        return importlib.reload(settings_module)
    yield _reload
    monkeypatch.undo()
    importlib.reload(settings_module)


class TestDefaults:
    def test_settings_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings_module.SETTINGS.select.text_fallback = False

    def test_sections_present(self):
        s = settings_module.Settings()
        assert isinstance(s.timeouts, settings_module.TimeoutConfig)
        assert isinstance(s.select, settings_module.SelectConfig)
        assert isinstance(s.logging, settings_module.LoggingConfig)


class TestEnvironment:
    def test_defaults_without_env(self, reload_settings, monkeypatch):
        for name in (
            "SNAPSELECT_ACTION_TIMEOUT_MS",
            "SNAPSELECT_OPTION_SELECTOR",
            "SNAPSELECT_TEXT_FALLBACK",
            "SNAPSELECT_LOG_FILE",
        ):
            monkeypatch.delenv(name, raising=False)

        mod = reload_settings()

        assert mod.SETTINGS.timeouts.action_timeout_ms == TIMEOUT_ELEMENT_DEFAULT
        assert mod.SETTINGS.select.option_selector == OPTION_SELECTOR
        assert mod.SETTINGS.select.text_fallback is True
        assert mod.SETTINGS.logging.log_file == ""

    def test_env_overrides(self, reload_settings):
        mod = reload_settings(
            SNAPSELECT_ACTION_TIMEOUT_MS="2500",
            SNAPSELECT_TEXT_FALLBACK="0",
            SNAPSELECT_LOG_JSON="1",
        )

        assert mod.SETTINGS.timeouts.action_timeout_ms == 2500
        assert mod.SETTINGS.select.text_fallback is False
        assert mod.SETTINGS.logging.json is True
