"""
Where: lambda_bridge/adapter/tests/test_adapter_config.py
What: Unit tests for AdapterConfig and the adapter logging bootstrap.
Why: Environment overrides must reach the body policy and log setup.
"""

from pathlib import Path

from lambda_bridge.adapter.config import AdapterConfig
from lambda_bridge.adapter.core import logging_config
from lambda_bridge.adapter.core.content_types import DEFAULT_POLICY


def test_defaults(monkeypatch):
    for name in ("APP_MODE", "DEBUG_PAYLOAD_LOGGING", "TEXT_CONTENT_TYPE_MARKERS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = AdapterConfig()

    assert config.APP_MODE == "production"
    assert config.DEBUG_PAYLOAD_LOGGING is False
    assert config.LOG_LEVEL == "INFO"
    assert config.body_policy() == DEFAULT_POLICY


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APP_MODE", "development")
    monkeypatch.setenv("DEBUG_PAYLOAD_LOGGING", "true")
    monkeypatch.setenv("TEXT_CONTENT_TYPE_MARKERS", '["application/json", "application/graphql"]')
    monkeypatch.setenv("FORM_DATA_CONTENT_TYPE", "multipart/mixed")

    config = AdapterConfig()
    policy = config.body_policy()

    assert config.APP_MODE == "development"
    assert config.DEBUG_PAYLOAD_LOGGING is True
    assert policy.text_markers == ("application/json", "application/graphql")
    assert policy.text_prefixes == ("text/",)
    assert policy.is_form_data("multipart/mixed; boundary=x") is True


def test_setup_logging_uses_packaged_config(monkeypatch):
    captured = {}
    monkeypatch.delenv("LOG_CONFIG_PATH", raising=False)
    monkeypatch.setattr(
        logging_config, "common_setup_logging", lambda path: captured.setdefault("path", path)
    )

    logging_config.setup_logging()

    assert captured["path"] == logging_config.DEFAULT_LOG_CONFIG_PATH
    assert Path(captured["path"]).is_file()


def test_setup_logging_prefers_env_then_explicit_path(monkeypatch):
    calls = []
    monkeypatch.setenv("LOG_CONFIG_PATH", "/etc/adapter/log.yaml")
    monkeypatch.setattr(logging_config, "common_setup_logging", calls.append)

    logging_config.setup_logging()
    logging_config.setup_logging("/explicit.yaml")

    assert calls == ["/etc/adapter/log.yaml", "/explicit.yaml"]
