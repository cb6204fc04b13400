import logging

from aidex.utils.logging import configure_root


def test_env_level_overrides_default(monkeypatch):
    monkeypatch.setenv("AIDEX_LOG_LEVEL", "warning")
    monkeypatch.delenv("AIDEX_DEBUG", raising=False)

    assert configure_root(logging.DEBUG) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch):
    monkeypatch.delenv("AIDEX_LOG_LEVEL", raising=False)
    monkeypatch.setenv("AIDEX_DEBUG", "yes")

    assert configure_root("INFO") == logging.DEBUG


def test_default_level_used_without_env(monkeypatch):
    monkeypatch.delenv("AIDEX_LOG_LEVEL", raising=False)
    monkeypatch.delenv("AIDEX_DEBUG", raising=False)

    assert configure_root("error") == logging.ERROR
