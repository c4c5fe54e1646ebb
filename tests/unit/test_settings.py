"""
Unit tests for settings.
"""

import pytest

from string_analyzer.common import settings as settings_module


def test_load_settings_success() -> None:
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME == "test-project"
    assert settings.ENV == "test"


def test_load_settings_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PROJECT_NAME", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = settings_module.load_settings(load_env=False)
    assert settings.PROJECT_NAME == "string-analyzer"
    assert settings.LOG_LEVEL == "INFO"


def test_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)
