"""Tests for configuration defaults and env overrides."""

import importlib

from restyler_core.config import Config


def test_defaults():
    cfg = Config()

    assert cfg.container_id == "supplemental-items"
    assert cfg.section_id == "sectionSupplemental"
    assert cfg.table_id == "supplementalTable"
    assert cfg.correlation_attribute == "data-submissionid"
    assert cfg.poll_interval == 0.1
    assert cfg.debounce_window == 0.3
    assert cfg.wait_timeout == 30.0


def test_zero_timeout_means_unbounded():
    assert Config(wait_timeout_ms=0).wait_timeout is None


def test_selector():
    assert Config().selector("supplementalTable") == "#supplementalTable"


def test_env_overrides(monkeypatch):
    config_module = importlib.import_module("restyler_core.config")

    monkeypatch.setenv("RESTYLER_DEBOUNCE_MS", "50")
    monkeypatch.setenv("RESTYLER_TABLE_ID", "checklistTable")
    try:
        reloaded = importlib.reload(config_module)
        cfg = reloaded.Config()
        assert cfg.debounce_ms == 50
        assert cfg.table_id == "checklistTable"
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)
