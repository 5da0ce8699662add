"""Tests for settings loaded from the environment."""
import pytest

from prompt_relay.config import (
    DEFAULT_MODEL,
    DEFAULT_PERSONA,
    DEFAULT_PROMPT,
    OPENAI_RESPONSES_URL,
    RelayConfig,
    RelaySettings,
)


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_ORG_ID", raising=False)
    config = RelaySettings(_env_file=None).relay_config()
    assert config.api_key == ""
    assert config.organization == ""
    assert config.upstream_url == OPENAI_RESPONSES_URL
    assert config.model == "gpt-4.1"
    assert config.default_prompt == "Say something about love!"


def test_openai_variables_are_not_prefixed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_ORG_ID", "org-env")
    monkeypatch.setenv("RELAY_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("RELAY_PERSONA", "answer in haiku")
    monkeypatch.setenv("RELAY_UPSTREAM_TIMEOUT_SECONDS", "15")
    settings = RelaySettings(_env_file=None)
    config = settings.relay_config()
    assert config.api_key == "sk-env"
    assert config.organization == "org-env"
    assert config.model == "gpt-4o-mini"
    assert config.persona == "answer in haiku"
    assert settings.upstream_timeout_seconds == 15.0


def test_settings_and_config_share_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_ORG_ID", raising=False)
    from_env = RelaySettings(_env_file=None).relay_config()
    assert from_env == RelayConfig(api_key="")
    assert (from_env.model, from_env.persona, from_env.default_prompt) == (
        DEFAULT_MODEL,
        DEFAULT_PERSONA,
        DEFAULT_PROMPT,
    )
