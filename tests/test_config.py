"""
Tests for settings and the policy built from them.
"""

import json
import logging

from comparison.policy import ComparisonPolicy, DEFAULT_POLICY
from core.config import Settings, update_golden_enabled
from core.logging import configure_logging


def test_defaults():
    settings = Settings()

    assert settings.golden_dir == "tests/__golden__"
    assert settings.update_golden is False
    assert "session.id" in settings.ignored_attributes
    assert settings.simplified_scopes == ["@opentelemetry/instrumentation-document-load"]


def test_default_policy_matches_default_settings():
    assert ComparisonPolicy.from_settings(Settings()) == DEFAULT_POLICY


def test_update_golden_env_flag(monkeypatch):
    assert update_golden_enabled() is False

    monkeypatch.setenv("UPDATE_GOLDEN", "1")

    assert update_golden_enabled() is True


def test_prefixed_update_flag(monkeypatch):
    monkeypatch.setenv("OTEL_GOLDEN_UPDATE_GOLDEN", "true")

    assert Settings().update_golden is True


def test_empty_update_flag_is_ignored(monkeypatch):
    monkeypatch.setenv("UPDATE_GOLDEN", "")

    assert Settings().update_golden is False


def test_policy_lists_from_environment(monkeypatch):
    monkeypatch.setenv("OTEL_GOLDEN_IGNORED_ATTRIBUTES", json.dumps(["build.id"]))
    monkeypatch.setenv("OTEL_GOLDEN_SIMPLIFIED_SCOPES", json.dumps(["@opentelemetry/instrumentation-fetch"]))

    policy = ComparisonPolicy.from_settings()

    assert policy.is_ignored("build.id")
    assert not policy.is_ignored("session.id")
    assert policy.is_simplified("@opentelemetry/instrumentation-fetch")


def test_configure_logging_installs_single_handler():
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        configure_logging("debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
