from __future__ import annotations

import pytest

from minicurl.config import USER_AGENT, ClientConfig, ConfigError, config_from_env


def test_config_defaults_to_no_timeout() -> None:
    config = config_from_env()

    assert config.timeout is None
    assert config.user_agent == USER_AGENT


def test_config_reads_timeout_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINICURL_TIMEOUT", "2.5")

    assert config_from_env().timeout == 2.5


def test_explicit_timeout_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINICURL_TIMEOUT", "2.5")

    assert config_from_env(10).timeout == 10


def test_invalid_environment_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MINICURL_TIMEOUT", "soon")

    with pytest.raises(ConfigError):
        config_from_env()


def test_client_config_rejects_negative_timeout() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(timeout=-1)
